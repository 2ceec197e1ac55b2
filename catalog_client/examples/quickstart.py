from catalog_client import CatalogClient, ClientConfig
from catalog_client.exceptions import DuplicateIsbn

cfg = ClientConfig(base_url="http://localhost:8000")
cli = CatalogClient(cfg)

# 1) add a book
book = cli.create_book(title="The Hobbit", author_id=1, published_year=1937, isbn="978-0547928227")
print("Created:", book.id)

# 2) the same ISBN again is rejected
try:
    cli.create_book(title="The Hobbit (copy)", author_id=1, published_year=1937, isbn="978-0547928227")
except DuplicateIsbn as exc:
    print("Rejected:", exc)

# 3) fix a typo, keeping the ISBN
book = cli.update_book(book.id, title="The Hobbit, or There and Back Again",
                       author_id=1, published_year=1937, isbn=book.isbn)

# 4) oldest first, two per page
for b in cli.list_books(sort_by="published-year", page=1, page_size=2):
    print(b.published_year, b.title)

# 5) remove it
cli.delete_book(book.id)
