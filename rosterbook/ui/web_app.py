"""
Web application module for the Roster Book application.

This module contains the Flask server exposing the roster as JSON and a
single endpoint that runs typed commands through the same pipeline as the
console.
"""
from typing import Optional

from flask import Flask, jsonify, request
from loguru import logger

from ..parser import ParseError
from ..services import CommandError
from ..services.logic_manager import LogicManager
from ..services.service_factory import ServiceFactory
from ..utils import APP_TITLE
from ..utils.constants import DEFAULT_HOST, DEFAULT_PORT
from .person_card import help_text, person_cards


class WebAppState:
    """
    State holder for the web application.

    Args:
        logic: Logic manager to run commands with (built by the factory if omitted)
    """

    def __init__(self, logic: Optional[LogicManager] = None,
                 factory: Optional[ServiceFactory] = None):
        self.logic = logic or (factory or ServiceFactory()).create_logic()


def create_app(logic: Optional[LogicManager] = None,
               factory: Optional[ServiceFactory] = None) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        logic: Logic manager shared by every request
        factory: Factory used to build the logic manager when none is given

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app_state = WebAppState(logic, factory)
    app.config["APP_STATE"] = app_state

    @app.route("/")
    def index():
        """Describe the API."""
        return jsonify({
            "title": APP_TITLE,
            "commands": app_state.logic.parser.command_words,
            "endpoints": ["/api/players", "/api/teams", "/api/positions", "/api/command", "/api/help"],
        })

    # ==================== API Endpoints ==================== #

    @app.route("/api/players", methods=["GET"])
    def get_players():
        """Players in the current filtered view, as person cards."""
        cards = person_cards(app_state.logic.filtered_person_list)
        return jsonify({"players": [card.to_dict() for card in cards]})

    @app.route("/api/teams", methods=["GET"])
    def get_teams():
        model = app_state.logic.model
        teams = []
        for team in app_state.logic.filtered_team_list:
            captain = model.get_team_captain(team)
            teams.append({
                "name": team.name,
                "captain": captain.name.full_name if captain else None,
                "empty": model.is_team_empty(team),
            })
        return jsonify({"teams": teams})

    @app.route("/api/positions", methods=["GET"])
    def get_positions():
        model = app_state.logic.model
        return jsonify({"positions": [
            {"name": position.name, "assigned": model.is_position_assigned(position)}
            for position in app_state.logic.filtered_position_list
        ]})

    @app.route("/api/help", methods=["GET"])
    def get_help():
        return jsonify({"help": help_text()})

    @app.route("/api/command", methods=["POST"])
    def run_command():
        """Execute a command typed by the user."""
        data = request.get_json(silent=True)
        command_text = data.get("command") if isinstance(data, dict) else None
        if not isinstance(command_text, str) or not command_text.strip():
            return jsonify({"error": "A non-empty 'command' string is required"}), 400

        try:
            result = app_state.logic.execute(command_text)
        except (ParseError, CommandError) as e:
            logger.info("Command rejected: {}", command_text)
            return jsonify({"error": str(e)}), 400

        return jsonify({
            "feedback": result.feedback_to_user,
            "show_help": result.show_help,
            "exit": result.exit,
        })

    return app


def run_web_app(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                factory: Optional[ServiceFactory] = None) -> None:
    """
    Run the Flask web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        factory: Factory used to build the services
    """
    app = create_app(factory=factory)
    # Commands must run one at a time against the shared model
    app.run(host=host, port=port, debug=False, threaded=False)
