"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from ordering.customer.user import User
from ordering.domain import ordering


@ordering.command(part_of="User")
class RegisterUser:
    username = String(required=True, max_length=50)


@ordering.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_username(command.username.strip()) is not None:
            raise ValidationError({"username": ["Username is already taken"]})

        user = User.register(command.username)
        repo.add(user)
        return str(user.id)
