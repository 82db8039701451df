from .auth import router as auth_router
from .users import router as users_router
from .players import router as players_router
from .games import router as games_router
from .rankings import router as rankings_router

__all__ = ["auth_router", "users_router", "players_router", "games_router", "rankings_router"]
