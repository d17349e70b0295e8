"""
Document store contract.

A store keeps JSON-like documents grouped in collections. Implementations
raise StoreUnavailable when the backend fails and NotFound when a write
targets a missing document.
"""

OPERATORS = ("==", "<", "<=", ">", ">=")


class DocumentStore:
    """
    Base class for document store backends.

    Subclasses implement every method. Documents are plain dicts; the
    store assigns keys and never interprets field values.
    """

    def add(self, collection, data):
        """
        Insert a new document.

        Args:
            collection: collection name
            data: dict of JSON-serializable values

        Returns:
            The new document key
        """
        raise NotImplementedError("subclasses of DocumentStore must provide add()")

    def get(self, collection, key):
        """Return the document dict for key, or None when absent."""
        raise NotImplementedError("subclasses of DocumentStore must provide get()")

    def update(self, collection, key, changes):
        """Merge changes into an existing document."""
        raise NotImplementedError("subclasses of DocumentStore must provide update()")

    def delete(self, collection, key):
        """Remove a document."""
        raise NotImplementedError("subclasses of DocumentStore must provide delete()")

    def query(self, collection, where=(), order_by=None, descending=False):
        """
        Find documents in a collection.

        Args:
            collection: collection name
            where: iterable of (field, operator, value) filters, all of
                which must match. Operator is one of OPERATORS.
            order_by: field name to sort on, or None for store order
            descending: reverse the sort

        Returns:
            List of (key, data) tuples
        """
        raise NotImplementedError("subclasses of DocumentStore must provide query()")
