import pytest

from painel_admin.core import validators


def test_normalize_username():
    assert validators.normalize_username("  Ana.Souza ") == "ana.souza"


@pytest.mark.parametrize("raw", ["ab", "-ana", "ana_", "a" * 65])
def test_normalize_username_rejects(raw):
    with pytest.raises(ValueError):
        validators.normalize_username(raw)


def test_validate_name():
    assert validators.validate_name("  Ana Souza ", "Nome") == "Ana Souza"
    with pytest.raises(ValueError, match="Nome is required"):
        validators.validate_name("   ", "Nome")
    with pytest.raises(ValueError, match="invalid characters"):
        validators.validate_name("<script>", "Nome")


def test_validate_cpf_accepts_punctuation():
    assert validators.validate_cpf("529.982.247-25") == "52998224725"


@pytest.mark.parametrize("raw", ["529.982.247-26", "111.111.111-11", "1234", ""])
def test_validate_cpf_rejects(raw):
    with pytest.raises(ValueError):
        validators.validate_cpf(raw)


def test_validate_matricula():
    assert validators.validate_matricula(" m-2024-01 ") == "M-2024-01"
    with pytest.raises(ValueError):
        validators.validate_matricula("M 01")


def test_filter_cleaners():
    assert validators.clean_name_filter(" Ana 123! ") == "Ana"
    assert validators.clean_username_filter("Ana.S@") == "ana.s"


def test_validate_aluno_normalizes_copy():
    record = {"nome": " Ana ", "cpf": "529.982.247-25", "matricula": "m1", "extra": 1}
    cleaned = validators.validate_aluno(record)
    assert cleaned == {"nome": "Ana", "cpf": "52998224725", "matricula": "M1", "extra": 1}
    assert record["nome"] == " Ana "


def test_validate_aluno_requires_cpf():
    with pytest.raises(ValueError, match="CPF"):
        validators.validate_aluno({"nome": "Ana"})


def test_validate_admin():
    cleaned = validators.validate_admin({"username": "Root.Admin", "nome": "Root"})
    assert cleaned["username"] == "root.admin"
    with pytest.raises(ValueError):
        validators.validate_admin({"username": "root"})
