from __future__ import annotations

import pytest
from _support import AppWording, ErrorsWording, payload
from pydantic import ValidationError

from pywording.codec import WordingCodec
from pywording.exceptions import WordingDecodeError
from pywording.models import CatalogWording, SupportedLocales


def test_mutate_fills_only_missing_fields() -> None:
    fresh = AppWording(title="Bonjour", errors=ErrorsWording(network="Réseau"))
    base = AppWording(title="Hello", greeting="Hi", errors=ErrorsWording(network="Network", generic="Oops"))

    fresh.mutate(using=base)

    assert fresh.title == "Bonjour"
    assert fresh.greeting == "Hi"
    assert fresh.errors is not None
    assert fresh.errors.network == "Réseau"
    assert fresh.errors.generic == "Oops"


def test_mutate_is_not_commutative() -> None:
    a = AppWording(title="A")
    b = AppWording(title="B", greeting="hello")

    a.mutate(using=b)
    b2 = AppWording(title="B", greeting="hello")
    b2.mutate(using=AppWording(title="A"))

    assert a.title == "A"
    assert b2.title == "B"


def test_mutate_copies_nested_values() -> None:
    fresh = AppWording()
    base = AppWording(errors=ErrorsWording(network="Network"))

    fresh.mutate(using=base)
    assert fresh.errors is not None
    fresh.errors.generic = "changed"

    assert base.errors is not None
    assert base.errors.generic is None


def test_nulls_are_treated_as_missing() -> None:
    wording = AppWording.model_validate({"title": None, "signIn": "Sign in"})

    assert wording.title is None
    assert wording.sign_in == "Sign in"
    assert wording.present_fields() == {"sign_in"}


def test_catalog_wording_fills_nested_keys() -> None:
    fresh = CatalogWording.model_validate({"title": "Titre", "errors": {"network": "Réseau"}})
    base = CatalogWording.model_validate(
        {"title": "Title", "footer": "Footer", "errors": {"network": "Network", "generic": "Oops"}}
    )

    fresh.mutate(using=base)

    assert fresh.get("title") == "Titre"
    assert fresh.get("footer") == "Footer"
    assert fresh.get("errors.network") == "Réseau"
    assert fresh.get("errors.generic") == "Oops"
    assert fresh.get("errors.missing", "fallback") == "fallback"


def test_codec_decode_and_encode_use_camel_case() -> None:
    codec = WordingCodec(AppWording)

    wording = codec.decode(payload(signIn="Sign in", title="Hello"))
    encoded = codec.encode(wording)

    assert wording.sign_in == "Sign in"
    assert b'"signIn":"Sign in"' in encoded
    assert b"greeting" not in encoded


@pytest.mark.parametrize("data", [b"not json", b"[1, 2]", b'{"title": 3}'])
def test_codec_decode_rejects_malformed_payloads(data: bytes) -> None:
    codec = WordingCodec(AppWording)

    with pytest.raises(WordingDecodeError):
        codec.decode(data)


def test_supported_locales_ordering() -> None:
    supported = SupportedLocales(locales=("fr", "en", "de"), base="en")

    assert supported.base_first() == ["en", "fr", "de"]
    assert supported.first("de") == ["de", "fr", "en"]
    assert "fr" in supported
    assert "it" not in supported


def test_supported_locales_validation() -> None:
    with pytest.raises(ValidationError):
        SupportedLocales(locales=("fr",), base="en")
    with pytest.raises(ValidationError):
        SupportedLocales(locales=("en", "en"), base="en")
    with pytest.raises(ValidationError):
        SupportedLocales(locales=(), base="en")
