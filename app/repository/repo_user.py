from typing import List, Optional
from fastapi import Depends
from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.db.base import get_db
from app.models.model_user import User


class UserRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get_all(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_login(self, login: str) -> Optional[User]:
        return self.db.query(User).filter(or_(User.username == login, User.email == login)).first()

    def find_conflict(self, username: str, email: str, exclude_user_id: Optional[int] = None) -> Optional[User]:
        query = self.db.query(User).filter(or_(User.username == username, User.email == email))
        if exclude_user_id is not None:
            query = query.filter(User.id != exclude_user_id)
        return query.first()

    def create(self, user_data: User) -> User:
        self.db.add(user_data)
        self.db.commit()
        self.db.refresh(user_data)
        return user_data

    def update(self, user: User) -> User:
        self.db.commit()
        self.db.refresh(user)
        return user

    def set_password_hash(self, user_id: int, password_hash: str) -> bool:
        updated = self.db.query(User).filter(User.id == user_id).update(
            {User.password_hash: password_hash}, synchronize_session=False
        )
        self.db.commit()
        return updated > 0
