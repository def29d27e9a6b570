import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from database_init import db

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Error de regla de negocio con su código HTTP."""

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}

    def to_dict(self):
        data = dict(self.payload)
        data["message"] = self.message
        return data


def validation_error(errors, message="Datos inválidos"):
    return jsonify({"message": message, "errors": errors}), 400


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        db.session.rollback()
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        messages = {
            400: "Solicitud inválida",
            401: "No autorizado",
            403: "Acceso denegado",
            404: "Recurso no encontrado",
            405: "Método no permitido",
        }
        if error.description and error.description != type(error).description:
            message = error.description
        else:
            message = messages.get(error.code, error.name)
        return jsonify({"message": message}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception("Error no controlado: %s", error)
        return jsonify({"message": "Error interno del servidor"}), 500
