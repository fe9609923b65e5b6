# portfolio/models/database.py

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
