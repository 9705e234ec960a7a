import click
from core.sa.repositories.user import UserRepository
from ..utils import db_option, open_session, print_user

@click.group()
def user():
    """User management commands"""
    pass

@user.command(name="add")
@db_option
@click.argument('name')
@click.option('--email', 'emails', multiple=True, help="Email address (repeatable)")
@click.option('--phone', 'phones', multiple=True, help="Phone number (repeatable)")
def add(db_url: str, name: str, emails: tuple, phones: tuple):
    """Create a user. Contacts already used by another user are dropped."""
    with open_session(db_url) as session:
        created = UserRepository(session).create_user(name, list(emails), list(phones))
        dropped = len(emails) + len(phones) - len(created.emails) - len(created.phones)
        click.echo(click.style(f"Created user {created.id}", fg='green'))
        if dropped:
            click.echo(click.style(f"Skipped {dropped} contact(s) already in use", fg='yellow'))
        print_user(created)

@user.command(name="list")
@db_option
def list_users(db_url: str):
    """List all users"""
    with open_session(db_url) as session:
        users = UserRepository(session).get_users()
        if not users:
            click.echo("No users found.")
            return
        for found in users:
            print_user(found)

@user.command(name="show")
@db_option
@click.argument('user_id', type=int)
def show(db_url: str, user_id: int):
    """Show a single user"""
    with open_session(db_url) as session:
        found = UserRepository(session).get_by_id(user_id)
        if found is None:
            raise click.ClickException(f"User {user_id} not found")
        print_user(found)

@user.command(name="delete")
@db_option
@click.argument('user_id', type=int)
def delete(db_url: str, user_id: int):
    """Delete a user"""
    with open_session(db_url) as session:
        if not UserRepository(session).delete_user(user_id):
            raise click.ClickException(f"User {user_id} not found")
    click.echo(click.style(f"Deleted user {user_id}", fg='green'))

if __name__ == '__main__':
    user()
