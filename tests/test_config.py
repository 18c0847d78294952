from core.config import AppSettings, write_user_env_vars


def test_generate_content_url(settings):
    assert settings.generate_content_url() == "https://gemini.test/v1/models/gemini-1.5-flash:generateContent"


def test_defaults_point_at_public_services():
    settings = AppSettings(_env_file=None, gemini_api_key="k")
    assert settings.generate_content_url().startswith("https://generativelanguage.googleapis.com/v1/models/")
    assert settings.wikipedia_summary_url == "https://en.wikipedia.org/api/rest_v1/page/summary"
    assert settings.http_timeout_seconds is None


def test_api_key_read_from_gemini_env_var(monkeypatch):
    monkeypatch.delenv("LANDMARK_LENS_GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    assert AppSettings(_env_file=None).gemini_api_key == "from-env"


def test_prefixed_env_vars(monkeypatch):
    monkeypatch.setenv("LANDMARK_LENS_GEMINI_MODEL", "gemini-pro")
    monkeypatch.setenv("LANDMARK_LENS_GEMINI_API_VERSION", "v1beta")
    settings = AppSettings(_env_file=None)
    assert settings.generate_content_url().endswith("/v1beta/models/gemini-pro:generateContent")


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"B": "2", "A": "1"}, env_path=env_path)
    write_user_env_vars({"A": "3"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["A=3", "B=2"]


def test_write_user_env_vars_reads_hand_edited_file(tmp_path):
    env_path = tmp_path / ".env"
    env_path.write_text(
        '# edited by hand\nexport GEMINI_API_KEY="secret"\n\nLANDMARK_LENS_GEMINI_MODEL=gemini-pro # override\n',
        encoding="utf-8",
    )
    write_user_env_vars({"LANDMARK_LENS_GEMINI_API_VERSION": "v1beta"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == [
        "GEMINI_API_KEY=secret",
        "LANDMARK_LENS_GEMINI_API_VERSION=v1beta",
        "LANDMARK_LENS_GEMINI_MODEL=gemini-pro",
    ]
