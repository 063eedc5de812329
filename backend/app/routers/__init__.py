# API Routers
from app.routers import auth, hotels

__all__ = ['auth', 'hotels']
