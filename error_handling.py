#!/usr/bin/env python3
"""
Error types and logging setup for the Random Maze game
Core modules raise, the Flask layer turns errors into JSON responses
"""

import logging
import logging.handlers
import json
import datetime
import traceback
from pathlib import Path
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException


class MazeError(Exception):
    """Base class for maze errors"""


class InvalidDimensionsError(MazeError, ValueError):
    """Requested grid size is outside the supported bounds"""

    def __init__(self, cols, rows, min_size, max_size):
        self.cols = cols
        self.rows = rows
        super().__init__(
            f"Maze size {cols}x{rows} outside supported range [{min_size}, {max_size}]"
        )


class OutOfBoundsError(MazeError, IndexError):
    """Coordinate query or mutation outside the grid"""

    def __init__(self, x, y, cols, rows):
        self.x = x
        self.y = y
        super().__init__(f"Cell ({x},{y}) is outside the {cols}x{rows} grid")


class GameNotFoundError(MazeError, KeyError):
    """No live game with the requested id"""

    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(game_id)

    def __str__(self):
        return f"Game {self.game_id} not found"


class MazeLogger:
    """Logging system with console and rotating file output"""

    def __init__(self, log_dir: str = 'logs', log_level: str = "INFO"):
        self.log_dir = log_dir
        self.error_counts: Dict[str, int] = {}
        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Setup console and rotating file handlers on the root logger"""
        Path(self.log_dir).mkdir(parents=True, exist_ok=True)

        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper()))
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(detailed_formatter)
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)

        file_handler = logging.handlers.RotatingFileHandler(
            str(Path(self.log_dir) / 'maze.log'), maxBytes=10*1024*1024, backupCount=5
        )
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            str(Path(self.log_dir) / 'maze_errors.log'), maxBytes=5*1024*1024, backupCount=3
        )
        error_handler.setFormatter(detailed_formatter)
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)

        self.logger = logging.getLogger('maze')

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None):
        """Log error with context and stack trace"""
        error_type = type(error).__name__
        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

        self.logger.error(f"{error_type}: {error}")
        self.logger.debug(f"Full stack trace:\n{traceback.format_exc()}")

        if context:
            self.logger.info(f"Error context: {json.dumps(context, default=str)}")

    def log_performance(self, operation: str, duration: float, details: Optional[Dict[str, Any]] = None):
        """Log performance metrics"""
        perf_logger = logging.getLogger('performance')
        perf_logger.info(f"Performance: {operation} completed in {duration:.3f}s")

        if details:
            perf_logger.debug(f"Performance details: {json.dumps(details, default=str)}")

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of all logged errors"""
        return {
            'total_errors': sum(self.error_counts.values()),
            'error_types': self.error_counts.copy(),
        }


class FlaskErrorHandler:
    """Flask error handlers returning JSON bodies"""

    def __init__(self, app: Flask, logger: MazeLogger):
        self.app = app
        self.logger = logger
        self.setup_handlers()

    def _context(self):
        return {
            'request_method': request.method,
            'request_url': request.url,
            'timestamp': datetime.datetime.now().isoformat(),
        }

    def setup_handlers(self):
        """Setup Flask error handlers"""

        @self.app.errorhandler(GameNotFoundError)
        def game_not_found(error):
            self.logger.logger.info(f"Unknown game requested: {error.game_id}")
            return jsonify({'error': 'Not found', 'message': str(error)}), 404

        @self.app.errorhandler(MazeError)
        def maze_error(error):
            self.logger.log_error(error, self._context())
            return jsonify({'error': type(error).__name__, 'message': str(error)}), 400

        @self.app.errorhandler(ValueError)
        def bad_value(error):
            self.logger.log_error(error, self._context())
            return jsonify({'error': 'Bad request', 'message': str(error)}), 400

        @self.app.errorhandler(HTTPException)
        def http_error(error):
            return jsonify({'error': error.name, 'message': error.description}), error.code

        @self.app.errorhandler(Exception)
        def handle_exception(error):
            """Catch-all exception handler"""
            context = self._context()
            context['traceback'] = traceback.format_exc()
            self.logger.log_error(error, context)

            if self.app.debug:
                return jsonify({'error': 'Internal error', 'message': str(error),
                                'traceback': context['traceback']}), 500
            return jsonify({'error': 'Internal server error', 'message': 'Something went wrong'}), 500


def setup_error_handling(app: Flask, logger: MazeLogger) -> Flask:
    """Attach error handlers and request timing to a Flask app"""
    FlaskErrorHandler(app, logger)

    @app.before_request
    def log_request_info():
        request.environ['maze.start_time'] = datetime.datetime.now()
        logger.logger.debug(f"Request: {request.method} {request.path} - {request.remote_addr}")

    @app.after_request
    def log_response_info(response):
        start_time = request.environ.get('maze.start_time')
        if start_time is not None:
            duration = (datetime.datetime.now() - start_time).total_seconds()
            logger.log_performance('http_request', duration, {
                'method': request.method,
                'path': request.path,
                'status_code': response.status_code
            })
        return response

    return app
