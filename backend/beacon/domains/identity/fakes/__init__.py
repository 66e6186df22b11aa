"""Fake implementations for identity domain testing."""

from beacon.domains.identity.fakes.tenant_ids import FakeUniqueTenantIds

__all__ = ["FakeUniqueTenantIds"]
