from .files import FileService
from .sql import SqlService
from .weather import WeatherService

__all__ = ["FileService", "SqlService", "WeatherService"]
