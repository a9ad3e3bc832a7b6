# src/logs_agent/logging_setup.py

import logging
import logging.config
import os


def setup_logging(log_directory: str, level: int = logging.INFO, log_file_name: str = 'logs_agent.log', console_output: bool = True):
    """
    Configure logging for the agent with dictConfig.
    Records go to a rotating file in log_directory and, optionally, to the console.
    When the log directory cannot be used, records go to the console only.
    """
    log_file_path = os.path.join(log_directory, log_file_name)

    handlers = ['file']
    try:
        os.makedirs(log_directory, exist_ok=True)
        # Opened here so an unwritable file is caught before dictConfig
        with open(log_file_path, 'a'):
            pass
    except OSError as e:
        # Log directory unusable, console only
        print(f"Warning: Could not log to {log_file_path}, using console only. Error: {e}")
        handlers = []
        console_output = True

    if console_output:
        handlers.append('console')

    LOGGING_CONFIG = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'standard'
            }
        },
        'loggers': {
            'logs_agent': {
                'handlers': handlers,
                'level': level,
                'propagate': False
            },
        },
        'root': {
            'handlers': handlers,
            'level': logging.ERROR,  # Keep root at ERROR to avoid noise
        },
    }
    if 'file' in handlers:
        LOGGING_CONFIG['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': log_file_path,
            'maxBytes': 10485760,  # 10 MB
            'backupCount': 5,
            'encoding': 'utf8'
        }

    logging.config.dictConfig(LOGGING_CONFIG)
