from .models import Server
from .repository import ServerRepository

__all__ = ["Server", "ServerRepository"]
