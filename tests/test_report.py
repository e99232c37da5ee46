from dataset_freshness.report import Report


def test_fields_are_aligned():
    r = Report()
    r.add_field("Name", "Streets")
    r.add_field("Dataset status", "STALE")
    assert r.lines == ("Name:           Streets", "Dataset status: STALE")


def test_long_names_not_truncated():
    r = Report()
    r.add_field("A very long field name", 1)
    assert r.lines == ("A very long field name:1",)


def test_render_is_idempotent():
    r = Report()
    r.add_line("one")
    r.add_field("Two", 2)
    first = r.render()
    assert first == r.render() == str(r)
    assert first == "one\nTwo:            2\n"
    r.add_line("three")
    assert r.render() == first + "three\n"


def test_empty_report():
    assert Report().render() == "\n"


def test_verbose_echoes_each_line():
    seen = []
    r = Report(verbose=True, echo=seen.append)
    r.add_line("hello")
    r.add_field("Max age", "5.0 business days")
    assert seen == ["hello", "Max age:        5.0 business days"]
    assert len(r) == 2


def test_quiet_does_not_echo():
    seen = []
    r = Report(echo=seen.append)
    r.add_line("hello")
    assert seen == []
