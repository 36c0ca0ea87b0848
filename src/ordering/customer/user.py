"""User aggregate: the owner of carts and orders, identified by username."""

from protean.fields import String

from ordering.domain import ordering


@ordering.aggregate
class User:
    username = String(required=True, max_length=50, unique=True)

    @classmethod
    def register(cls, username):
        return cls(username=username.strip())


@ordering.repository(part_of=User)
class UserRepository:
    def find_by_username(self, username: str) -> User | None:
        """Return the user registered under `username`, or None."""
        users = self._dao.query.filter(username=username).all().items
        return users[0] if users else None
