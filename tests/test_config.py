from bloglist.config import Settings


def test_normal_mode_uses_mongodb_url():
    settings = Settings(MONGODB_URL="mongodb://db/blogs", TEST_MONGODB_URL="mongodb://db/blogs-test",
                        ENVIRONMENT="production")

    assert settings.database_url == "mongodb://db/blogs"


def test_test_mode_uses_test_mongodb_url():
    settings = Settings(MONGODB_URL="mongodb://db/blogs", TEST_MONGODB_URL="mongodb://db/blogs-test",
                        ENVIRONMENT="test")

    assert settings.database_url == "mongodb://db/blogs-test"


def test_mode_is_read_from_the_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("TEST_MONGODB_URL", "mongodb://ci/bloglist-test")

    assert Settings().database_url == "mongodb://ci/bloglist-test"


def test_cors_origins_are_split_on_commas():
    settings = Settings(CORS_ORIGINS="http://localhost:5173, https://blogs.example ,")

    assert settings.allowed_origins == ["http://localhost:5173", "https://blogs.example"]
