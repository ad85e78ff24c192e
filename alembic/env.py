from logging.config import fileConfig
from sqlalchemy import create_engine, pool
from alembic import context
from order_service.core.config import settings
from order_service.db.session import Base
import order_service.db.models  # noqa

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# version table named per service so other migration histories can sit alongside
CONFIGURE_OPTS = dict(
    target_metadata=Base.metadata,
    version_table="alembic_version_order",
    compare_type=True,
)

def run_migrations_offline():
    context.configure(
        url=settings.POSTGRES_DSN,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **CONFIGURE_OPTS,
    )
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    connectable = create_engine(settings.POSTGRES_DSN, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, **CONFIGURE_OPTS)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
