"""Unit tests for the CALL and DO builders."""

from querybuilder import NULL, Call, Do


def test_call_without_params() -> None:
    assert Call("refresh_stats").render() == "CALL refresh_stats()"


def test_call_formats_literals() -> None:
    assert Call("archive").params(2024, "eu", None, NULL).render() == "CALL archive(2024,'eu',NULL,NULL)"


def test_params_replace() -> None:
    assert Call("p").params(1).params(2, 3).render() == "CALL p(2,3)"


def test_do_expressions() -> None:
    assert Do("SLEEP(1)").expression("@x := 1").render() == "DO SLEEP(1),@x := 1"
