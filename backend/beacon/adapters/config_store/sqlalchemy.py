"""SQLAlchemy-backed config store.

One row per ``(tenant_id, config_id)`` in ``tenant_config``. The revision
column implements compare-and-swap: inserts rely on the primary key to
reject a second creator, updates are conditioned on the revision the
writer read. Each write runs in its own transaction, so a failure rolls
back completely.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

from beacon.core.exceptions import ConfigConflictError
from beacon.db.session import create_session_factory, init_db
from beacon.models.tenant_config import TenantConfig
from beacon.schemas.config import ConfigDoc, ConfigType, SettingsConfig, config_id_for

if TYPE_CHECKING:
    from beacon.core.context import RequestContext


class SqlAlchemyConfigStore:
    """SQL implementation of the ConfigStore protocol."""

    def __init__(self, engine: AsyncEngine) -> None:
        """Open a fresh session per call on ``engine``."""
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    async def initialize(self) -> None:
        """Create the ``tenant_config`` table if it does not exist yet."""
        await init_db(self._engine)

    async def get_scoped_full_config(
        self, ctx: "RequestContext", config_type: ConfigType
    ) -> ConfigDoc:
        """Load the tenant's document, or a blank unsaved one."""
        async with self._session_factory() as db:
            row = await db.get(TenantConfig, (ctx.tenant_id, config_id_for(config_type)))
            if row is None:
                return ConfigDoc.blank(config_type)
            return ConfigDoc(
                id=row.config_id,
                type=ConfigType(row.type),
                rev=row.rev,
                config=SettingsConfig.model_validate(row.config),
            )

    async def put(self, ctx: "RequestContext", doc: ConfigDoc) -> ConfigDoc:
        """Insert or conditionally update the row; raise on a stale revision."""
        body = doc.config.model_dump(mode="json")
        now = datetime.now(timezone.utc)
        new_rev = (doc.rev or 0) + 1

        async with self._session_factory() as db:
            async with db.begin():
                if doc.rev is None:
                    db.add(
                        TenantConfig(
                            tenant_id=ctx.tenant_id,
                            config_id=doc.id,
                            type=doc.type.value,
                            config=body,
                            rev=new_rev,
                            modified_at=now,
                        )
                    )
                    try:
                        await db.flush()
                    except IntegrityError as e:
                        raise ConfigConflictError(ctx.tenant_id, doc.id, doc.rev) from e
                else:
                    result = await db.execute(
                        update(TenantConfig)
                        .where(
                            TenantConfig.tenant_id == ctx.tenant_id,
                            TenantConfig.config_id == doc.id,
                            TenantConfig.rev == doc.rev,
                        )
                        .values(config=body, type=doc.type.value, rev=new_rev, modified_at=now)
                        .execution_options(synchronize_session=False)
                    )
                    if result.rowcount != 1:
                        raise ConfigConflictError(ctx.tenant_id, doc.id, doc.rev)

        return doc.model_copy(deep=True, update={"rev": new_rev})
