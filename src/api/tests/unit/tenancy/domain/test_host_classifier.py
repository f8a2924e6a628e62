"""Unit tests for hostname classification."""

import pytest

from tenancy.domain.host_classifier import (
    classify_domain_type,
    classify_environment,
)
from tenancy.domain.value_objects import DomainType, HostEnvironment


class TestClassifyEnvironment:
    """Tests for classify_environment()."""

    def test_production_admin_hostname(self):
        """A real registrable admin hostname is production."""
        env = classify_environment("painel.viafatto.com.br")

        assert env == HostEnvironment(is_dev=False, is_prod=True)

    def test_localhost_is_dev(self):
        env = classify_environment("localhost")

        assert env.is_dev is True
        assert env.is_prod is False

    @pytest.mark.parametrize(
        "hostname",
        [
            "127.0.0.1",
            "preview-123.lovable.app",
            "abc.lovableproject.com",
            "LOCALHOST",
        ],
    )
    def test_dev_indicators(self, hostname):
        """Loopback names and preview platforms are dev, never prod."""
        env = classify_environment(hostname)

        assert env.is_dev is True
        assert env.is_prod is False

    def test_bare_name_is_neither_dev_nor_prod(self):
        """A hostname without a dot does not look like a real domain."""
        env = classify_environment("intranet")

        assert env == HostEnvironment(is_dev=False, is_prod=False)

    def test_classification_ignores_case(self):
        assert classify_environment("Painel.Example.com") == classify_environment(
            "painel.example.com"
        )


class TestClassifyDomainType:
    """Tests for classify_domain_type()."""

    def test_painel_prefix_is_admin(self):
        assert classify_domain_type("painel.viafatto.com.br") == DomainType.ADMIN

    def test_mixed_case_painel_prefix_is_admin(self):
        assert classify_domain_type("Painel.Example.com") == DomainType.ADMIN

    @pytest.mark.parametrize(
        "hostname",
        ["viafatto.com.br", "www.viafatto.com.br", "admin.viafatto.com.br", "localhost"],
    )
    def test_other_hostnames_are_public(self, hostname):
        """Only the painel prefix selects the admin domain type."""
        assert classify_domain_type(hostname) == DomainType.PUBLIC

    def test_painel_must_be_a_prefix(self):
        assert classify_domain_type("meupainel.com.br") == DomainType.PUBLIC
