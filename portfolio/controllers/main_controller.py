# portfolio/controllers/main_controller.py

from datetime import datetime, timezone

from flask import Blueprint, render_template
from flask_babel import format_datetime

from ..services.dashboard_service import DashboardService

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    return render_template('pages/home.html')


@main_bp.route('/sobre')
def sobre():
    return render_template('pages/sobre.html')


@main_bp.route('/contato')
def contato():
    return render_template('pages/contato.html')


@main_bp.route('/dashboard')
def dashboard():
    dashboard_data = DashboardService.get_dashboard_data()
    atualizado_em = format_datetime(datetime.now(timezone.utc), 'short')
    return render_template('pages/dashboard.html',
                           dashboard_data=dashboard_data,
                           atualizado_em=atualizado_em)
