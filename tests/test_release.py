from innoparse.release import INNOSETUP_VERSIONS, NAME, VERSION, version_string


def test_version_string_parts():
    assert version_string().split(" ") == [NAME, VERSION]


def test_version_value():
    assert VERSION == "1.9"
    assert version_string().endswith("1.9")


def test_supported_range():
    assert INNOSETUP_VERSIONS.startswith("Inno Setup 1.2.10")
    assert INNOSETUP_VERSIONS.endswith("6.2.1")