from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.item import ItemCreate, ItemRead
from app.schemas.user import CurrentUser
from app.services.item_service import ItemService
from app.utils.jwt_auth import get_current_user

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=List[ItemRead])
async def find_all(db: Session = Depends(get_db)):
    """商品一覧"""
    return ItemService.find_all(db)


@router.get("/{item_id}", response_model=ItemRead)
async def find_by_id(item_id: int, db: Session = Depends(get_db)):
    """商品詳細"""
    return ItemService.find_by_id(db, item_id)


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
async def create(data: ItemCreate, current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """商品を出品"""
    return ItemService.create(db, data, current_user.id)


@router.put("/{item_id}", response_model=ItemRead)
async def mark_sold_out(item_id: int, current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """商品を売り切れにする"""
    return ItemService.mark_sold_out(db, item_id, current_user.id)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(item_id: int, current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """自分が出品した商品を削除"""
    ItemService.delete(db, item_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
