# librarydesk

An in-memory catalogue for a small library. It keeps track of
resources (books, journal articles, digital content and theses), the
users who borrow them, and which user holds which loan.

## Installation

```
pip install .
```

## Command line

```
librarydesk
```

This builds a demonstration library (`librarydesk.cli.build_demo_library`)
with four resources and two users. It prints the catalogue and the users,
lends two resources, returns one, and prints the state after each step.
The command takes no options other than `--help`.

## Library use

```python
from librarydesk.library import LibrarySystem
from librarydesk.resources import Book, Thesis
from librarydesk.user import User

library = LibrarySystem()
library.add_resource(Book(1, "The Great Gatsby", "F. Scott Fitzgerald", 1925, "Novel"))
library.add_resource(Thesis(4, "AI in Healthcare", "Alice Johnson", 2022, "Prof. Roberts"))
library.add_user(User(100, "Maria Ines"))

library.borrow_resource(100, 1)   # prints "Notification: Resource borrowed successfully.", returns True
library.return_resource(100, 1)   # prints "Notification: Resource returned successfully.", returns True

library.display_all_resources()
library.display_all_users()
```

### Resources

`librarydesk.resources` has an abstract `Resource` base and four kinds:
`Book` (`genre`), `Article` (`journal_name`), `DigitalContent`
(`file_format`) and `Thesis` (`supervisor`). Each is created as
`Kind(id, title, author, publication_year, detail)` and starts out
`available`. `Resource.describe()` returns the multi-line description
that `Resource.display()` prints.

### Users

`librarydesk.user.User(id, name)` keeps the ids of borrowed resources in
`borrowed_resource_ids`. `borrow`, `give_back` and `has_borrowed` manage
that list; `describe_borrowed()` returns the line that
`display_borrowed_resources()` prints.

### Lending

`LibrarySystem` holds resources and users (read-only views through the
`resources` and `users` properties) and looks them up with
`find_resource` and `find_user`, which return `None` when nothing
matches.

A resource can be lent to only one user at a time. A user can return
only what that user has borrowed. `borrow_resource` and `return_resource`
return `True` or `False`, and every attempt sends a
`librarydesk.notification.Notification` saying whether it succeeded.
Notifications go to standard output, or to the stream given as
`LibrarySystem(output=...)`.

### Output streams

`Notification.send`, `Resource.display`, `User.display_borrowed_resources`,
`LibrarySystem.display_all_resources` and `LibrarySystem.display_all_users`
each take an optional `file` argument, so the output can go to any text
stream instead of standard output.

## Limits

Everything lives in memory: there is no saving or loading of the
catalogue, no graphical interface, and the command only runs the fixed
demonstration session.

## Running the tests

```
pip install .[test]
pytest
```