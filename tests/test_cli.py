from librarydesk.cli import build_demo_library, main


def test_demo_library_contents():
    library = build_demo_library()
    assert [r.id for r in library.resources] == [1, 2, 3, 4]
    assert [r.resource_type for r in library.resources] == [
        "Book",
        "Article",
        "DigitalContent",
        "Thesis",
    ]
    assert [(u.id, u.name) for u in library.users] == [(100, "Maria Ines"), (101, "Elyas")]
    assert all(r.available for r in library.resources)


def test_main_runs_session(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Notification: Resource borrowed successfully.") == 2
    assert out.count("Notification: Resource returned successfully.") == 1
    assert "Borrowing failed." not in out


def test_main_final_state(capsys):
    main([])
    out = capsys.readouterr().out
    sections = [
        "--- All Resources ---",
        "--- All Users ---",
        "--- Borrowing Resource ---",
        "--- Updated Resources ---",
        "--- Updated Users ---",
        "--- Returning Resource ---",
        "--- Final Resources ---",
        "--- Final Users ---",
    ]
    positions = [out.index(s) for s in sections]
    assert positions == sorted(positions)
    final_users = out[out.index("--- Final Users ---"):]
    assert "User Elyas has borrowed resources with IDs: 3 \n" in final_users
    assert "User Maria Ines has borrowed resources with IDs: \n" in final_users