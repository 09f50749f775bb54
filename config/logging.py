import json
import logging
import sys
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.fromtimestamp(record.created).isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(
	level: str = 'INFO',
	log_directory: str | None = None,
	max_file_size: int = 10 * 1024 * 1024,
	backup_count: int = 5,
) -> None:
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(getattr(logging, level.upper()))

	logging.getLogger('httpx').setLevel(logging.WARNING)

	console_handler = logging.StreamHandler(sys.stdout)
	console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
	console_handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
	root_logger.addHandler(console_handler)

	if log_directory:
		log_dir = Path(log_directory)
		log_dir.mkdir(parents=True, exist_ok=True)
		file_handler = RotatingFileHandler(
			log_dir / 'app.log',
			maxBytes=max_file_size,
			backupCount=backup_count,
			encoding='utf-8',
		)
		file_handler.setFormatter(JSONFormatter())
		root_logger.addHandler(file_handler)
