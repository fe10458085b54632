"""Product repository: the unit of work over the products table."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.app.core.exceptions import StorageError

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Changes made through ``add``, ``update`` and ``remove`` are staged on the
    session and only written by ``persist``, which commits them as one
    transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._added: list[tuple[Product, ProductTable]] = []
        self._staged = 0

    def list_all(self) -> list[Product]:
        rows = self._session.exec(select(ProductTable)).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def add(self, product: Product) -> None:
        """Stage a new product. Its ``id`` is set once ``persist`` succeeds."""
        row = ProductTable(name=product.name, price=product.price)
        self._session.add(row)
        self._added.append((product, row))
        self._staged += 1

    def update(self, product: Product) -> bool:
        """Stage an overwrite of name and price. Returns False if the row is gone."""
        row = self._session.get(ProductTable, product.id)
        if row is None:
            return False
        row.name = product.name
        row.price = product.price
        self._session.add(row)
        self._staged += 1
        return True

    def remove(self, product: Product) -> bool:
        """Stage deletion of a product. Returns False if the row is gone."""
        row = self._session.get(ProductTable, product.id)
        if row is None:
            return False
        self._session.delete(row)
        self._staged += 1
        return True

    def persist(self) -> int:
        """Commit all staged changes and return how many were written.

        Raises:
            StorageError: the store rejected or could not apply the changes.
                The session is rolled back and nothing staged is kept.
        """
        staged = self._staged
        try:
            self._session.commit()
            for product, row in self._added:
                self._session.refresh(row)
                product.id = row.id
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(
                "Failed to persist product changes",
                staged=staged,
                error_type=type(e).__name__,
            )
            raise StorageError("Failed to persist product changes") from e
        finally:
            self._added = []
            self._staged = 0

        logger.debug("Persisted {} product change(s)", staged)
        return staged
