import os
import tempfile

# settings are read when app.config is first imported, so this runs before any test module
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite:///" + os.path.join(tempfile.gettempdir(), "storefront_catalog_test.db"),
)
os.environ.setdefault("API_SECRET_KEY", "test-secret")
