import io

from librarydesk.user import User


def test_borrow_and_has_borrowed():
    user = User(100, "Maria Ines")
    assert not user.has_borrowed(2)
    user.borrow(2)
    assert user.has_borrowed(2)
    assert user.borrowed_resource_ids == [2]


def test_give_back_removes_all_occurrences():
    user = User(100, "Maria Ines")
    for rid in (2, 3, 2):
        user.borrow(rid)
    user.give_back(2)
    assert user.borrowed_resource_ids == [3]
    assert not user.has_borrowed(2)


def test_give_back_unknown_id_is_harmless():
    user = User(101, "Elyas")
    user.borrow(3)
    user.give_back(9)
    assert user.borrowed_resource_ids == [3]


def test_describe_borrowed_lists_ids_in_order():
    user = User(101, "Elyas")
    user.borrow(3)
    user.borrow(1)
    assert user.describe_borrowed() == "User Elyas has borrowed resources with IDs: 3 1 "


def test_describe_borrowed_empty():
    user = User(100, "Maria Ines")
    assert user.describe_borrowed() == "User Maria Ines has borrowed resources with IDs: "


def test_display_borrowed_resources_adds_newline():
    user = User(100, "Maria Ines")
    user.borrow(2)
    out = io.StringIO()
    user.display_borrowed_resources(out)
    assert out.getvalue() == user.describe_borrowed() + "\n"


def test_users_have_independent_loans():
    first, second = User(1, "A"), User(2, "B")
    first.borrow(5)
    assert second.borrowed_resource_ids == []