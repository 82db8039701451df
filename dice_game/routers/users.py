from fastapi import APIRouter
from dice_game.auth import CurrentUser
from dice_game.schemas import UserPublic, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: CurrentUser):
    return UserResponse(message="User found", data=UserPublic.from_db(current_user))
