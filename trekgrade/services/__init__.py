"""
Services layer.

- GPXParserService: read GPX tracks/routes into grade engine samples
"""
from .gpx_parser import GPXParserService

__all__ = ["GPXParserService"]
