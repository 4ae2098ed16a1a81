#!/usr/bin/env python3
"""
Movie log retrieval

Reads the log from a local file or an http(s) URL. Any retrieval failure is
logged and degrades to an empty document; there is no retry.
"""

import logging
from pathlib import Path
from typing import Union

import requests

from movielog.constants import DEFAULT_TIMEOUT
from movielog.parser import MovieLog, parse_document

logger = logging.getLogger(__name__)


def is_url(location: Union[str, Path]) -> bool:
    return str(location).lower().startswith(('http://', 'https://'))


def _fetch_url(url: str, timeout: float) -> str:
    """GET the document and decode it as UTF-8, dropping any byte-order mark"""
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content.decode('utf-8-sig')


def _read_file(path: Path) -> str:
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        return f.read()


def fetch_text(location: Union[str, Path], timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Return the full document text, or '' if it cannot be retrieved

    Args:
        location: Local path or http(s) URL
        timeout:  Request timeout in seconds (URLs only)
    """
    try:
        if is_url(location):
            text = _fetch_url(str(location), timeout)
        else:
            text = _read_file(Path(location))
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.error(f"Error loading movies from {location}: {e}")
        return ''

    logger.info(f"Loaded movie log from {location} ({len(text)} chars)")
    return text


def load_movie_log(location: Union[str, Path], timeout: float = DEFAULT_TIMEOUT) -> MovieLog:
    """Fetch once and parse into entries and sections"""
    return parse_document(fetch_text(location, timeout))
