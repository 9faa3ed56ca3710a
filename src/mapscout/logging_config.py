# MapScout — Logging configuration (rotating file + stdout)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
from typing import Optional


def configure_logging(level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
	"""Configure root logger with stdout and, when log_dir is set, a rotating file.

	The format is single-line, tab-separated: time, level, logger, message.
	"""
	fmt = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"

	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)

	stream = logging.StreamHandler()
	stream.setFormatter(logging.Formatter(fmt))
	root.addHandler(stream)

	if not log_dir:
		return
	os.makedirs(log_dir, exist_ok=True)
	file_handler = logging.handlers.RotatingFileHandler(
		os.path.join(log_dir, "mapscout.log"), maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
	)
	file_handler.setFormatter(logging.Formatter(fmt))
	root.addHandler(file_handler)
