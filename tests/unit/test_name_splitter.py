from app.proforma.name_splitter import split_name


class TestSplitName:
    def test_last_token_is_surname(self) -> None:
        result = split_name("Jane Mary Doe")
        assert result.surname == "Doe"
        assert result.forename == "Jane Mary"

    def test_two_tokens(self) -> None:
        result = split_name("John Smith")
        assert (result.forename, result.surname) == ("John", "Smith")

    def test_single_token_is_surname(self) -> None:
        result = split_name("Cher")
        assert result.surname == "Cher"
        assert result.forename == ""

    def test_empty_name(self) -> None:
        result = split_name("")
        assert (result.surname, result.forename) == ("", "")

    def test_whitespace_runs_collapsed(self) -> None:
        result = split_name("  Anne   Marie\tJones ")
        assert result.forename == "Anne Marie"
        assert result.surname == "Jones"
