# portfolio/content.py
"""Conteúdo fixo do portfólio: perfil do estudante e dados iniciais (seed)."""

ESTUDANTE = {
    'nome': 'Miguel Tomio Toledo Nonaka',
    'curso': 'Desenvolvimento de software multiplataforma',
    'instituicao': 'Fatec - Faculdade de Tecnologia',
    'ano_ingresso': 2025,
}

TECNOLOGIAS_MAIS_USADAS = ('Node.js', 'JavaScript', 'Python', 'CSS', 'Typescript')

SEED_PROJETOS = (
    {
        'nome': '🔍 Reconhecimento de Lixo com YOLOv8',
        'descricao': 'Sistema de visão computacional que detecta diferentes tipos de resíduos para auxiliar na reciclagem automatizada.',
        'participacao': 'Treinei o modelo YOLOv8, realizei testes com imagens reais e adaptei o modelo para uso em dispositivos móveis.',
        'imagem': None,
        'concluido': True,
    },
    {
        'nome': '📱 App Mobile para leitura de Kanjis com IA',
        'descricao': 'Aplicativo Android que utiliza um modelo de machine learning para identificar e traduzir Kanjis através da câmera.',
        'participacao': 'Desenvolvi a interface, integrei o TensorFlow Lite ao app e realizei testes com usuários reais.',
        'imagem': None,
        'concluido': True,
    },
    {
        'nome': '🎮 Jogos em Unity',
        'descricao': 'Desenvolvimento de uma Visual Novel, um FPS e um Bomberman Online como projetos de estudo e prática com Unity e C#.',
        'participacao': 'Criação de mecânicas de gameplay, UI e multiplayer usando Mirror Networking.',
        'imagem': None,
        'concluido': True,
    },
    {
        'nome': '🧮 Validador de CPF em Python e C',
        'descricao': 'Ferramenta simples para validar números de CPF com base no cálculo dos dígitos verificadores.',
        'participacao': 'Desenvolvi a lógica em Python e fiz a conversão para linguagem C para comparar desempenho.',
        'imagem': None,
        'concluido': True,
    },
    {
        'nome': '🌐 API RESTful com PHP, MySQL e JavaScript',
        'descricao': 'API completa para CRUD de usuários, com banco de dados relacional e integração front-end.',
        'participacao': 'Desenvolvi toda a API, modelei o banco de dados e criei uma interface web funcional.',
        'imagem': None,
        'concluido': True,
    },
    {
        'nome': '🌐 API Kernel Panic - FATEC',
        'descricao': 'Plataforma para análise gráfica de exportações e importações realizadas pelo Estado de São Paulo entre os anos de 2013 e 2023.',
        'participacao': 'Desenvolvi as primeiras querys iniciais para receber os dados dos bancos. Criação e host das docker images do projeto no AWS',
        'imagem': None,
        'concluido': True,
    },
)

SEED_DISCIPLINAS = (
    'Algoritmos e Lógica de Programação',
    'Desenvolvimento Web I',
    'Design Digital',
    'Engenharia de Software I',
    'Modelagem de Banco de Dados',
    'Sistemas Operacionais e Redes de Computadores',
    'Matemática para Computação',
    'Inglês I',
    'Estrutura de Dados',
    'Técnicas de Programação I',
)
