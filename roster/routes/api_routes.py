"""Read-only JSON view of the current session's directory."""

import logging
from flask import Blueprint, jsonify

from ..domain.errors import RosterError
from ..selection import KeyedSelectionAdapter
from ..sessions import get_session_directory

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.errorhandler(RosterError)
def handle_roster_error(e):
    logger.warning("API request failed: %s", e)
    return jsonify({'status': 'error', 'message': str(e)}), 400


@api_bp.route('/departments')
def list_departments():
    directory = get_session_directory()
    adapter = KeyedSelectionAdapter(directory.departments)
    departments = []
    for row in adapter.rows:
        entry = row.department.to_dict()
        entry['key'] = row.key
        entry['label'] = str(row.department)
        departments.append(entry)
    return jsonify({'status': 'success', 'departments': departments})


@api_bp.route('/departments/<int:key>')
def get_department(key: int):
    directory = get_session_directory()
    department = KeyedSelectionAdapter(directory.departments).resolve(key)
    return jsonify({'status': 'success', 'department': department.to_dict()})


@api_bp.route('/employees')
def list_employees():
    directory = get_session_directory()
    return jsonify({
        'status': 'success',
        'employees': [employee.to_dict() for employee in directory.employees],
    })
