from typing import Optional
from sqlalchemy.orm import Session
from app.models.user import User
from app.schemas.user import UserCreate, UserOut, UserAllOut
from app.storage.user.user_interface import IUserRepository
from app.core.db import transaction


class SQLAlchemyUserRepository(IUserRepository):
    """
    使用 SQLAlchemy 实现的用户仓库
    业务层依赖 IUserRepository 接口，而不是这个具体实现
    """

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_id(self, user_id: int) -> Optional[UserOut]:
        user = self.db.get(User, user_id)
        return UserOut.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserAllOut]:
        user = self.db.query(User).filter(User.username == username).first()
        return UserAllOut.model_validate(user) if user else None

    def create_user(self, user_data: UserCreate) -> UserOut:
        user = User(**user_data.model_dump())
        with transaction(self.db):
            self.db.add(user)
        self.db.refresh(user)
        return UserOut.model_validate(user)
