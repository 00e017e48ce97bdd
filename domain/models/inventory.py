"""
Pantry inventory models.
"""

from sqlalchemy import Column, String, Text, Float, Date, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.types import EntityMixin, SoftDeleteMixin, new_id


class IngredientItem(EntityMixin, SoftDeleteMixin, Base):
    """One purchase batch of an ingredient in a user's pantry"""

    __tablename__ = "ingredient_item"

    name = Column(Text, nullable=False, index=True)
    quantity = Column(Float, nullable=False, default=0)
    unit = Column(String(32), nullable=False, default="")
    amount = Column(Text, nullable=False, default="")  # free-text, e.g. "2 pcs"
    storage = Column(String(16), nullable=False, default="fridge", index=True)
    category_id = Column(
        String(36), ForeignKey("ingredient_category.id"), nullable=True, index=True
    )
    batch_id = Column(String(36), nullable=False, default=new_id)
    thumbnail = Column(Text, nullable=False, default="")
    icon = Column(Text, nullable=False, default="")
    note = Column(Text, nullable=False, default="")
    expiry_date = Column(Date, nullable=False, index=True)
    purchase_date = Column(Date, nullable=False)
    owner_user_id = Column(String(64), nullable=False, index=True)

    category = relationship("IngredientCategory", lazy="joined", viewonly=True)

    @classmethod
    def new(cls, **fields):
        fields.setdefault("batch_id", new_id())
        return super().new(**fields)

    def __repr__(self):
        return f"<IngredientItem(id={self.id}, name='{self.name}', expiry={self.expiry_date})>"
