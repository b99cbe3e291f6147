from models.base_model import Base, BaseModel
from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship


class User(BaseModel, Base):
    __tablename__ = "users"
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    is_chirpy_red = Column(Boolean, nullable=False, default=False)

    chirps = relationship("Chirp", back_populates="user", passive_deletes=True)

    @property
    def password(self):
        raise AttributeError("Password: Write-only field")
