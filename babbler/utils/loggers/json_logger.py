from datetime import datetime
import os
import logging
import json
import sys

# JSON logging for the generator and its command-line runner


class JsonLogger(logging.Formatter):
    """Formatter that renders each log record as a single JSON line."""

    def format(self, record):
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format

        Returns:
            str: JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'path': record.pathname,
            'line': record.lineno,
            'function': record.funcName
        }

        # Structured payload passed as extra={"metrics": {...}}
        if hasattr(record, 'metrics'):
            log_data['metrics'] = record.metrics

        if record.exc_info:
            log_data['exception'] = {
                'type': str(record.exc_info[0].__name__),
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_data, default=str)


def get_project_root():
    """
    Get the absolute path to the project root directory.

    Returns:
        str: Path to project root directory
    """
    current_dir = os.path.dirname(os.path.abspath(__file__))

    # babbler/utils/loggers -> project root
    return os.path.abspath(os.path.join(current_dir, '..', '..', '..'))


def setup_log_file(log_file_path):
    """
    Make sure the directory of a log file exists.

    Args:
        log_file_path (str): Path to the log file

    Returns:
        str: Absolute path to the log file
    """
    log_file_path = os.path.abspath(log_file_path)
    log_dir = os.path.dirname(log_file_path)
    if not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir, exist_ok=True)
        except OSError as e:
            print(f"Error creating log directory {log_dir}: {e}", file=sys.stderr)
            log_file_path = os.path.join(
                '/tmp', os.path.basename(log_file_path))

    return log_file_path


def determine_log_path(log_file=None):
    """
    Determine the path for the log file.

    Args:
        log_file (str, optional): Specific log file path

    Returns:
        str: Path to use for logging
    """
    if log_file:
        return setup_log_file(log_file)

    log_dir = os.path.join(get_project_root(), 'logs')
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    default_log_file = os.path.join(log_dir, f"babbler_{timestamp}.log")

    return setup_log_file(default_log_file)


def get_logger(logger_name, log_file=None, clear_existing=True, console_json=True,
               level="INFO"):
    """
    Get a configured logger instance with JSON formatting.

    The console handler writes to stderr so that generated text printed on
    stdout stays clean.

    Args:
        logger_name (str): Name for the logger
        log_file (str, optional): Path to the log file
        clear_existing (bool): Whether to clear existing handlers
        console_json (bool): Whether to use JSON formatting for console output
        level (str or int): Console log level

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)

    if clear_existing and logger.handlers:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level if isinstance(level, int) else level.upper())

    if console_json:
        console_handler.setFormatter(JsonLogger())
    else:
        console_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)

    logger.addHandler(console_handler)

    # The file always receives DEBUG and above, as JSON
    if log_file is not None:
        log_path = determine_log_path(log_file)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JsonLogger())
        logger.addHandler(file_handler)

    return logger


def log_json(logger, message, data=None):
    """
    Log a message with optional JSON data.

    Args:
        logger (logging.Logger): Logger instance
        message (str): Log message
        data (dict, optional): Data to include in the log
    """
    if data is None:
        logger.info(message)
    else:
        logger.info(message, extra={"metrics": data})
