from fastapi import APIRouter, Depends

from app.api.deps import verify_token
from app.api.v1.routes_auth import router as auth_router
from app.api.v1.routes_products import router as products_router
from app.api.v1.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"], dependencies=[Depends(verify_token)])
api_router.include_router(products_router, prefix="/products", tags=["products"], dependencies=[Depends(verify_token)])

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
