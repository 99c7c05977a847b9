import pytest

from managedesk.university import AdminStaff, Person, Professor, Student, main


def _feed(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def _student():
    return Student("S1", "Alice", "alice@example.com", "F", "555", "CS", 3)


def test_person_is_abstract():
    with pytest.raises(TypeError):
        Person("P1", "Bob", "bob@example.com", "M", "555")


def test_student_details():
    assert _student().display_details() == (
        "Student -- > \nName: Alice\nID : S1\nDepartment: CS\nLevel: 3"
    )


def test_professor_details():
    professor = Professor("P1", "Bob", "bob@example.com", "M", "555", "Math", 12)
    assert professor.display_details() == (
        "Professor\nName: Bob\nID: P1\nSpecialization: Math\nExperience: 12 years"
    )


def test_admin_details():
    admin = AdminStaff("A1", "Carol", "carol@example.com", "F", "555", "Dean")
    assert admin.display_details() == (
        "Admin Staff\nName: Carol\nID: A1\nPosition: Dean"
    )


def test_main_adds_and_displays_student(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["1", "S1", "Alice", "alice@example.com", "F", "555", "CS", "3", "4", "5"],
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "✅ Student added..." in out
    assert _student().display_details() in out
    assert out.index("===== Students =====") < out.index("Name: Alice")
    assert out.index("Name: Alice") < out.index("===== Professors =====")
    assert out.rstrip().endswith("👋 Exiting program. Goodbye!")


def test_main_reads_several_words_from_one_line(monkeypatch, capsys):
    _feed(monkeypatch, ["3 A1 Carol carol@example.com F 555 Dean", "4", "5"])
    main([])
    out = capsys.readouterr().out
    assert "✅ Admin staff added..." in out
    assert "Position: Dean" in out
    assert out.index("===== Admins =====") < out.index("Name: Carol")


def test_main_rejects_unknown_option(monkeypatch, capsys):
    _feed(monkeypatch, ["9", "5"])
    main([])
    out = capsys.readouterr().out
    assert "❌ Invalid option. Try again!" in out


def test_main_bad_level_adds_nobody(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["1", "S1", "Alice", "alice@example.com", "F", "555", "CS", "high", "4", "5"],
    )
    main([])
    out = capsys.readouterr().out
    assert "✅ Student added..." not in out
    assert "Name: Alice" not in out
    assert "===== Students =====" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, [])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Goodbye" not in out
    assert "===== University Management System =====" in out