"""A Certain Bookstore: in-memory book inventory and rating store."""
