"""
Converter page routes.
"""
from flask import Blueprint, current_app, jsonify, redirect, render_template, request

from flask_app.services.converter_service import ADJUSTMENTS, ConverterService

main_bp = Blueprint('main', __name__)


def _get_service() -> ConverterService:
    return ConverterService(current_app.config['ZONEHOP_SETTINGS'])


def _resolve_request_state(service: ConverterService):
    return service.resolve_state(
        zone=request.args.get('tz'),
        text=request.args.get('when'),
        adjust=request.args.get('adjust'),
    )


@main_bp.route('/')
def index():
    """Display the converter page."""
    service = _get_service()
    state = _resolve_request_state(service)

    return render_template('index.html',
                           state=state,
                           timezones=service.settings.timezones,
                           conversions=service.get_conversions(state.instant),
                           adjustments=ADJUSTMENTS,
                           calendar_url=service.get_calendar_url(state.instant))


@main_bp.route('/calendar')
def add_to_calendar():
    """Redirect to a pre-filled Google Calendar event for the selected time."""
    service = _get_service()
    state = _resolve_request_state(service)
    url = service.get_calendar_url(state.instant, request.args.get('title'))
    return redirect(url)


@main_bp.route('/api/convert')
def api_convert():
    """JSON view of the converter state."""
    service = _get_service()
    state = _resolve_request_state(service)
    return jsonify(service.to_dict(state, request.args.get('title')))
