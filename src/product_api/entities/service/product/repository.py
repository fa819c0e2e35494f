"""Data-access layer for products."""

from datetime import UTC, datetime

from sqlmodel import Session, select

from .entity import Product
from .table import ProductTable


class ProductNotFoundError(LookupError):
    """Raised when an update targets an identifier with no active product."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


def _now() -> str:
    return datetime.now(UTC).isoformat()


class ProductRepository:
    """Data-access layer for products.

    Soft-deleted rows are invisible to every read and to delete. Store errors
    propagate unchanged; committing is left to the caller.
    """

    def __init__(
        self,
        session: Session,
        upsert_on_update: bool = True,
        auto_timestamps: bool = True,
    ) -> None:
        self._session = session
        self._upsert_on_update = upsert_on_update
        self._auto_timestamps = auto_timestamps

    def _get_active_row(self, product_id: int) -> ProductTable | None:
        statement = select(ProductTable).where(
            ProductTable.id == product_id,
            ProductTable.is_deleted == False,  # noqa: E712
        )
        return self._session.exec(statement).first()

    def list_active(self) -> list[Product]:
        statement = select(ProductTable).where(ProductTable.is_deleted == False)  # noqa: E712
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def get_active(self, product_id: int) -> Product | None:
        row = self._get_active_row(product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def create(self, product: Product) -> Product:
        """Insert a new row; the store assigns the identifier."""
        row = ProductTable.model_validate(product.model_dump(exclude={"id"}))
        if self._auto_timestamps:
            row.created_at = row.updated_at = _now()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def update(self, product: Product) -> Product:
        """Overwrite the whole row identified by ``product.id``.

        An identifier with no row (or only a soft-deleted one) is written
        anyway unless upsert is disabled, in which case
        ProductNotFoundError is raised.
        """
        if product.id is None:
            raise ValueError("Product id is required for update")

        if not self._upsert_on_update and self._get_active_row(product.id) is None:
            raise ProductNotFoundError(product.id)

        row = ProductTable.model_validate(product.model_dump())
        if self._auto_timestamps:
            row.updated_at = _now()
            if row.created_at is None:
                existing = self._session.get(ProductTable, product.id)
                row.created_at = existing.created_at if existing else row.updated_at

        merged = self._session.merge(row)
        self._session.flush()
        self._session.refresh(merged)
        return Product.model_validate(merged, from_attributes=True)

    def delete(self, product_id: int) -> bool:
        """Flip the soft-delete flag of an active product."""
        row = self._get_active_row(product_id)
        if row is None:
            return False

        row.is_deleted = True
        if self._auto_timestamps:
            row.updated_at = _now()
        self._session.add(row)
        self._session.flush()
        return True
