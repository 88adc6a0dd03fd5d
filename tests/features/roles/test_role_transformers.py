"""Tests for role version transforms."""

from rbac_api.common.versioning import ApiVersion
from rbac_api.features.roles.models.domain import RoleV1, RoleV2, StoredRole
from rbac_api.features.roles.transformers import to_v1, to_v2, transform

CREATED = "2024-01-01T00:00:00.000Z"
UPDATED = "2024-01-02T00:00:00.000Z"


def make_v2_role(**overrides):
    fields = dict(
        id="role-1",
        name="editor",
        permissions=["read_user", "update_user"],
        created_at=CREATED,
        updated_at=UPDATED,
        version=3,
        description="Edits users",
        metadata={"team": "support"},
    )
    fields.update(overrides)
    return RoleV2(**fields)


class TestRoleTransformers:
    """Tests for to_v1, to_v2 and transform."""
    
    def test_to_v1_drops_v2_fields(self):
        record = to_v1(make_v2_role()).to_record()
        
        assert record == {
            "id": "role-1",
            "name": "editor",
            "permissions": ["read_user", "update_user"],
            "createdAt": CREATED,
            "updatedAt": UPDATED,
        }
    
    def test_round_trip_v2_v1_v2(self):
        original = make_v2_role()
        
        round_tripped = to_v2(to_v1(original))
        
        for field in ("id", "name", "permissions", "created_at", "updated_at"):
            assert getattr(round_tripped, field) == getattr(original, field)
        assert round_tripped.version == 1
        assert round_tripped.metadata == {}
        assert round_tripped.description is None
        assert "description" not in round_tripped.to_record()
    
    def test_to_v2_keeps_existing_v2_fields(self):
        stored = StoredRole(
            id="role-1",
            name="editor",
            permissions=["read_user"],
            created_at=CREATED,
            updated_at=UPDATED,
            version=2,
            description="Edits users",
            metadata={"k": "v"},
        )
        
        role = to_v2(stored)
        
        assert role.version == 2
        assert role.description == "Edits users"
        assert role.metadata == {"k": "v"}
    
    def test_to_v2_synthesizes_missing_fields_for_v1_records(self):
        stored = StoredRole.model_validate({
            "id": "role-1",
            "name": "viewer",
            "permissions": ["read_user"],
            "createdAt": CREATED,
            "updatedAt": UPDATED,
        })
        
        record = to_v2(stored).to_record()
        
        assert record["version"] == 1
        assert record["metadata"] == {}
        assert "description" not in record
    
    def test_transform_dispatches_on_version(self):
        role = make_v2_role()
        
        assert isinstance(transform(role, ApiVersion.V1), RoleV1)
        assert not isinstance(transform(role, ApiVersion.V1), RoleV2)
        assert isinstance(transform(role, ApiVersion.V2), RoleV2)
