"""
Adapter: Product repository.

Implements ProductRepository port.
Responsible for reading and writing the products table with
parameterized statements. Schema creation lives in migrations.
"""

from typing import Optional

from sqlalchemy import text as sql_text
from sqlalchemy.engine import Engine

from app.domain.catalog.entities import Product
from app.domain.catalog.ports import ProductRepository

# products.id is a 32-bit INTEGER column
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1

_COLUMNS = "id, name, price, availability"


def _to_product(row) -> Product:
    """Map a result row to a Product entity."""
    return Product(
        id=int(row.id),
        name=row.name,
        price=float(row.price),
        availability=bool(row.availability),
    )


class SqlProductRepository(ProductRepository):
    """SQL implementation of the product repository.

    Every method issues a single self-contained statement. Writes run
    inside ``engine.begin()`` so they commit on success.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize repository with an engine built by the composition root."""
        self._engine = engine

    def find_all(self) -> list[Product]:
        """Return every product ordered by id ascending."""
        query = sql_text(f"SELECT {_COLUMNS} FROM products ORDER BY id ASC")
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_to_product(row) for row in rows]

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with the given id, or None if absent."""
        if not (_MIN_ID <= product_id <= _MAX_ID):
            return None

        query = sql_text(f"SELECT {_COLUMNS} FROM products WHERE id = :id")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": product_id}).first()
        return _to_product(row) if row is not None else None

    def insert(self, name: str, price: float) -> Product:
        """Insert a product, letting the store assign id and availability."""
        statement = sql_text(
            f"""
            INSERT INTO products (name, price)
            VALUES (:name, :price)
            RETURNING {_COLUMNS}
            """
        )
        with self._engine.begin() as conn:
            row = conn.execute(statement, {"name": name, "price": price}).one()
        return _to_product(row)

    def update(self, product: Product) -> Optional[Product]:
        """Overwrite the mutable fields of an existing product."""
        statement = sql_text(
            f"""
            UPDATE products
            SET name = :name, price = :price, availability = :availability
            WHERE id = :id
            RETURNING {_COLUMNS}
            """
        )
        with self._engine.begin() as conn:
            row = conn.execute(
                statement,
                {
                    "id": product.id,
                    "name": product.name,
                    "price": product.price,
                    "availability": product.availability,
                },
            ).first()
        return _to_product(row) if row is not None else None

    def delete(self, product_id: int) -> bool:
        """Delete a product; returns whether a row was removed."""
        if not (_MIN_ID <= product_id <= _MAX_ID):
            return False

        statement = sql_text("DELETE FROM products WHERE id = :id")
        with self._engine.begin() as conn:
            result = conn.execute(statement, {"id": product_id})
        return result.rowcount > 0
