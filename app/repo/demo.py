from app.domain.dtos import BookIn

# Catalog served by a fresh instance when SEED_DEMO_DATA is on.
DEMO_BOOKS: list[BookIn] = [
    BookIn(title="The Fellowship of the Ring", author_id=1, published_year=1954, isbn="978-0547928210"),
    BookIn(title="The Two Towers", author_id=1, published_year=1954, isbn="978-0547928203"),
    BookIn(title="The Return of the King", author_id=1, published_year=1955, isbn="978-0547928197"),
    BookIn(title="Harry Potter and the Sorcerer's Stone", author_id=2, published_year=1997, isbn="978-0590353427"),
    BookIn(title="Harry Potter and the Chamber of Secrets", author_id=2, published_year=1998, isbn="978-0439064873"),
    BookIn(title="Harry Potter and the Prisoner of Azkaban", author_id=2, published_year=1999, isbn="978-0439136365"),
    BookIn(title="Harry Potter and the Goblet of Fire", author_id=2, published_year=2000, isbn="978-0439139601"),
    BookIn(title="1984", author_id=3, published_year=1949, isbn="978-0451524935"),
    BookIn(title="To Kill a Mockingbird", author_id=4, published_year=1960, isbn="978-0061120084"),
    BookIn(title="Pride and Prejudice", author_id=5, published_year=1813, isbn="978-1503290563"),
    BookIn(title="Moby-Dick", author_id=6, published_year=1851, isbn="978-1503280786"),
    BookIn(title="The Martian", author_id=7, published_year=2011, isbn="978-0553418026"),
    BookIn(title="The Da Vinci Code", author_id=8, published_year=2003, isbn="978-0307474278"),
    BookIn(title="The Hunger Games", author_id=9, published_year=2008, isbn="978-0439023481"),
    BookIn(title="Catching Fire", author_id=9, published_year=2009, isbn="978-0439023498"),
    BookIn(title="Dune", author_id=10, published_year=1965, isbn="978-0441172719"),
    BookIn(title="Foundation", author_id=11, published_year=1951, isbn="978-0553293357"),
    BookIn(title="Neuromancer", author_id=12, published_year=1984, isbn="978-0441569595"),
    BookIn(title="Gone Girl", author_id=13, published_year=2012, isbn="978-0307588371"),
    BookIn(title="The Girl with the Dragon Tattoo", author_id=14, published_year=2005, isbn="978-0307454546"),
]
