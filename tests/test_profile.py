import pytest

from thinkdrills.profile import (
    Audit,
    BasicProfile,
    Describable,
    ExtraFields,
    ProfileDecorator,
    TermPaperTitle,
    YearOfEnrolment,
)


def test_basic_profile_describe():
    profile = BasicProfile(1001, 100, "Max")
    assert profile.describe() == "Name = Max, ID = 1001, Grade = 100"


def test_basic_profile_defaults():
    assert BasicProfile().describe() == "Name = , ID = -1, Grade = -1"


def test_full_decoration_chain():
    profile = Audit(
        True,
        YearOfEnrolment(
            2017, TermPaperTitle("Password Manager", BasicProfile(1001, 100, "Max"))
        ),
    )
    assert profile.describe() == (
        "Name = Max, ID = 1001, Grade = 100"
        ", TermPaperTitleData = Password Manager"
        ", Year of Enrolment = 2017"
        ", Is Student Audit the class = 1"
    )


def test_plain_decorator_passes_through():
    base = BasicProfile(7, 50, "Ann")
    assert ProfileDecorator(base).describe() == base.describe()


def test_decorators_compose_in_any_order():
    base = BasicProfile(3, 40, "Bo")
    year_first = TermPaperTitle("T", YearOfEnrolment(2020, base)).describe()
    title_first = YearOfEnrolment(2020, TermPaperTitle("T", base)).describe()
    assert year_first.startswith(base.describe())
    assert title_first.startswith(base.describe())
    assert year_first.endswith(", TermPaperTitleData = T")
    assert title_first.endswith(", Year of Enrolment = 2020")


def test_audit_false_shows_zero():
    profile = Audit(False, BasicProfile(1, 2, "C"))
    assert profile.describe().endswith(", Is Student Audit the class = 0")


def test_describable_is_abstract():
    with pytest.raises(TypeError):
        Describable()


def test_extra_fields_round_trip():
    record = ExtraFields()
    record.add("ID", "1001")
    record.add("TermPaperTitle", "Password Manager")
    assert record.retrieve("ID") == "1001"
    assert record.retrieve("TermPaperTitle") == "Password Manager"


def test_extra_fields_keep_first_value():
    record = ExtraFields()
    record.add("Grade", "100")
    record.add("Grade", "50")
    assert record.retrieve("Grade") == "100"


def test_extra_fields_missing_key_is_empty():
    record = ExtraFields()
    assert record.retrieve("Name") == ""


def test_extra_fields_describe_lines():
    record = ExtraFields()
    record.add("ID", "1001")
    record.add("Name", "Maxim")
    assert record.describe().splitlines() == ["ID = 1001", "Name = Maxim"]