import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Float, Integer, String, Text

from app.db import Base


def new_product_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    # naive UTC so values compare the same way on sqlite and server databases
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=new_product_id)
    name = Column(String(100), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String(64), nullable=False, index=True)
    inventory = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    last_updated = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("inventory >= 0", name="ck_products_inventory_non_negative"),
    )

    def __repr__(self):
        return f"<Product slug={self.slug} name={self.name}>"
