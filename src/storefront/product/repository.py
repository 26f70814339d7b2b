"""Repository for the Product aggregate."""

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.queries import fetch_all


@storefront.repository(part_of=Product)
class ProductRepository:
    """Catalogue lookups used by checkout and browsing."""

    def find_in_stock(self, product_ids) -> list[Product]:
        """Products among ``product_ids`` that are currently in stock."""
        product_ids = list(product_ids)
        if not product_ids:
            return []
        return fetch_all(self._dao.query.filter(id__in=product_ids, in_stock=True))

    def browse(self, category=None, in_stock=None, limit=20, page=1):
        """One page of the catalogue, sorted by name.

        Returns the Protean result set: ``items`` for the page and ``total``
        for the unpaginated match count.
        """
        filters = {}
        if category is not None:
            filters["category"] = category
        if in_stock is not None:
            filters["in_stock"] = in_stock

        query = self._dao.query.filter(**filters) if filters else self._dao.query
        return query.order_by("name").offset((page - 1) * limit).limit(limit).all()

    def find_by_ids(self, product_ids) -> list[Product]:
        product_ids = list(product_ids)
        if not product_ids:
            return []
        return fetch_all(self._dao.query.filter(id__in=product_ids))
