from .models import Friend, Profile
from .repository import ProfileRepository

__all__ = ["Friend", "Profile", "ProfileRepository"]
