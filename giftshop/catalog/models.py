"""SQLAlchemy models for the gift catalog.

Defines Category, Product and Option tables for persistent storage.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from giftshop.infrastructure.database import Base

if TYPE_CHECKING:
    from giftshop.catalog.category_service import CategoryService


class Category(Base):
    """Grouping that every product belongs to.

    Attributes:
        id: Category identifier.
        name: Unique display name.
        color: Hex color used by the storefront (e.g., "#6c95d1").
        image_url: Category banner image URL.
        description: Optional description.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    color: Mapped[str] = mapped_column(String(7), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, name={self.name})>"

    def update(
        self,
        name: str,
        color: str,
        image_url: str,
        description: str | None,
    ) -> None:
        """Replace the mutable fields."""
        self.name = name
        self.color = color
        self.image_url = image_url
        self.description = description


class Product(Base):
    """Product entity in the catalog.

    A product belongs to exactly one category and owns its options.
    At least one option is required when the product is created; the
    rule is not re-checked afterwards.

    Attributes:
        id: Product identifier.
        name: Product name.
        price: Price in won.
        image_url: Product image URL.
        category_id: Owning category.
        options: Purchasable options in insertion order.
    """

    __tablename__ = "products"

    # Attribute names accepted as sort keys.
    FIELD_NAMES = frozenset(
        {"id", "name", "price", "image_url", "category", "category_id"}
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(15), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    category: Mapped["Category"] = relationship("Category", lazy="selectin")
    options: Mapped[list["Option"]] = relationship(
        "Option",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Option.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name})>"

    @classmethod
    async def create(
        cls,
        name: str,
        price: int,
        image_url: str,
        category_id: int,
        category_service: "CategoryService",
    ) -> "Product":
        """Build a product with its category resolved.

        Args:
            name: Product name.
            price: Price in won.
            image_url: Product image URL.
            category_id: Category to attach the product to.
            category_service: Resolves the category id.

        Returns:
            New, unsaved product.

        Raises:
            CatalogError: If the category does not exist.
        """
        category = await category_service.find_by_id(category_id)
        return cls(
            name=name,
            price=price,
            image_url=image_url,
            category=category,
            category_id=category.id,
            options=[],
        )

    async def update(
        self,
        name: str,
        price: int,
        image_url: str,
        category_id: int,
        category_service: "CategoryService",
    ) -> None:
        """Replace the mutable fields, re-resolving the category if it changed.

        Raises:
            CatalogError: If the new category does not exist.
        """
        if category_id != self.category_id:
            category = await category_service.find_by_id(category_id)
            self.category = category
            self.category_id = category.id
        self.name = name
        self.price = price
        self.image_url = image_url

    def find_option(self, option_id: int) -> "Option | None":
        """Find one of this product's options by id."""
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def has_option_named(self, name: str, exclude: "Option | None" = None) -> bool:
        """Check whether another option already uses the name."""
        return any(
            option.name == name and option is not exclude
            for option in self.options
        )


class Option(Base):
    """Purchasable variant of a product (e.g., color or size).

    Attributes:
        id: Option identifier.
        name: Option name, unique within its product.
        quantity: Units available.
        product_id: Parent product.
    """

    __tablename__ = "options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="options")

    __table_args__ = (
        UniqueConstraint("product_id", "name", name="uq_options_product_name"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Option(id={self.id}, name={self.name})>"

    def update(self, name: str, quantity: int) -> None:
        """Replace the mutable fields."""
        self.name = name
        self.quantity = quantity
