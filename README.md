# patternkit

A compact collection of classic design patterns, each runnable on its own,
plus a small layered REST API for products that applies checksummed SQL
migrations to an SQLite database on start-up.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Design pattern demos

Each pattern lives in its own module and has a command that runs a short
demonstration and prints its output:

| Command                | Module                  | Pattern                                                   |
|------------------------|-------------------------|-----------------------------------------------------------|
| `patternkit-strategy`  | `patternkit.strategy`   | Strategy: a `ShoppingCart` pays with any `PaymentStrategy` (`CreditCardPayment`, `PixPayment`) |
| `patternkit-builder`   | `patternkit.builder`    | Builder: `UserBuilder` assembles a `User`                  |
| `patternkit-adapter`   | `patternkit.adapter`    | Adapter: `SquarePegAdapter` lets a `SquarePeg` be tested against a `RoundHole` |
| `patternkit-decorator` | `patternkit.decorator`  | Decorator: `WithMilk` and `WithSugar` wrap a `Coffee`      |
| `patternkit-flyweight` | `patternkit.flyweight`  | Flyweight: `TreeFactory` shares `TreeType` objects between `Tree`s |

The classes can also be used directly:

```python
from patternkit.builder import UserBuilder
from patternkit.decorator import SimpleCoffee, WithMilk, WithSugar
from patternkit.adapter import RoundHole, SquarePeg, SquarePegAdapter
from patternkit.strategy import PixKeyType, PixPayment, ShoppingCart

user = UserBuilder("Gabriel").email("gabriel@example.com").age(23).build()

coffee = WithSugar(WithMilk(SimpleCoffee()))
print(coffee.description())   # Simple Coffee + Milk + Sugar

hole = RoundHole(5.0)
print(hole.fits(SquarePegAdapter(SquarePeg(8.0))))   # False

cart = ShoppingCart(PixPayment("buyer@example.com", PixKeyType.EMAIL))
cart.checkout(100.0)   # prints and returns the receipt line
```

`UserBuilder.age` raises `ValueError` for an age outside the range of an
unsigned 32-bit number. `PaymentStrategy.pay`, `ShoppingCart.checkout`,
`TreeType.display` and `Tree.draw` print their line and also return it.

## Product REST API

`patternkit.api` serves a small product catalogue built in layers:
`patternkit.products` holds the `Product` record, the persistence call
`find_all()` and the service call `list_products()`; `patternkit.api`
exposes them over HTTP with `create_app()`, a Flask application.

| Method | Path        | Response                        |
|--------|-------------|---------------------------------|
| GET    | `/products` | the product names, comma separated |
| POST   | `/products` | `Product created`               |

Start the server with:

```
patternkit-api
```

Options:

- `--database` – SQLite database file (default `app.db`)
- `--migrations` – directory of `.sql` migrations (default `./migrations`)
- `--host` – address to listen on (default `127.0.0.1`)
- `--port` – port to listen on (default `8000`)

Before serving, `prepare_database(connection, directory)` brings the
database up to date: it creates the `t_migration` table when
`check_table_exists` reports it missing, then calls `run_migrations`. If
that fails, the command prints the error and exits with status 1.

### Migrations

`patternkit.migrations.run_migrations(connection, directory)` goes through
the files in `directory` in name order and applies every `.sql` file that
has not been applied yet, recording its file name together with its
SHA3-256 checksum (computed by `patternkit.sha3sum.sha3_256_of_file`). A
file that was applied before is checked against the recorded checksum; if
the file has been changed since, `ChecksumMismatchError` is raised instead
of applying it again.

## What the package does not do

- The product catalogue is a fixed list: `find_all()` always returns
  `Product A` and `Product B`, and `POST /products` only answers
  `Product created` without storing anything. The `Product` record is not
  read from or written to the database.
- There is no singleton example among the pattern demos.