"""
Tests unitaires pour l'authentification des requêtes.
"""

import hashlib
import pytest

from marvel_client.client.signer import RequestSigner


class TestRequestSigner:
    """Tests pour RequestSigner."""

    def test_missing_public_key(self):
        """La clé publique est obligatoire dès la construction."""
        with pytest.raises(ValueError):
            RequestSigner("")

        with pytest.raises(ValueError):
            RequestSigner(None)

    def test_public_mode(self, public_signer):
        """Mode public : seul apikey est ajouté."""
        assert not public_signer.signed
        assert public_signer.auth_params() == {"apikey": "abc"}

    def test_empty_private_key_is_public_mode(self):
        signer = RequestSigner("abc", "")

        assert not signer.signed
        assert list(signer.auth_params()) == ["apikey"]

    def test_signed_mode_keys(self, signed_signer):
        """Mode signé : apikey, ts et hash, dans cet ordre."""
        params = signed_signer.auth_params()

        assert signed_signer.signed
        assert list(params) == ["apikey", "ts", "hash"]
        assert params["apikey"] == "pub"

    def test_timestamp_in_milliseconds(self, signed_signer, fixed_time):
        assert signed_signer.auth_params()["ts"] == str(int(fixed_time * 1000))
        assert signed_signer.timestamp() == "1700000000123"

    def test_hash_is_md5_of_ts_private_public(self, signed_signer):
        """hash = md5(ts + clé privée + clé publique)."""
        params = signed_signer.auth_params()
        expected = hashlib.md5(f"{params['ts']}privpub".encode("utf-8")).hexdigest()

        assert params["hash"] == expected

    def test_known_hash(self):
        """Exemple de la documentation Marvel."""
        signer = RequestSigner("1234", "abcd", clock=lambda: 0.001)

        assert signer.auth_params()["ts"] == "1"
        assert signer.compute_hash("1") == "ffd275c5130566a2916217b101f26150"

    def test_fresh_signature_per_call(self, wall_clock):
        """Chaque appel recalcule ts et hash."""
        signer = RequestSigner("pub", "priv", clock=wall_clock)

        first = signer.auth_params()
        wall_clock.advance(0.005)
        second = signer.auth_params()

        assert first["ts"] != second["ts"]
        assert first["hash"] != second["hash"]

    def test_same_millisecond_may_match(self, wall_clock):
        signer = RequestSigner("pub", "priv", clock=wall_clock)

        assert signer.auth_params() == signer.auth_params()

    def test_compute_hash_requires_private_key(self, public_signer):
        with pytest.raises(ValueError):
            public_signer.compute_hash("1")

    def test_repr_hides_private_key(self, signed_signer):
        assert "'priv'" not in repr(signed_signer)
        assert "signed" in repr(signed_signer)

    def test_keys_are_immutable(self, signed_signer):
        with pytest.raises(AttributeError):
            signed_signer.public_key = "other"
