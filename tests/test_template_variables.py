"""Tests for individual template resolvers."""

from unittest.mock import Mock

from geolog.core import Cache, LogContext, LogEntry, Trackable
from geolog.templates import TemplateEnvironment, get_template_by_token


def _value(token: str, ctx: LogContext, env: TemplateEnvironment) -> str:
    return get_template_by_token(token).get_value(ctx, env)


class TestDateTimeTemplates:
    def test_date(self, env):
        assert _value("DATE", LogContext(), env) == "2026-10-18"

    def test_time(self, env):
        assert _value("TIME", LogContext(), env) == "19:30"

    def test_datetime(self, env):
        assert _value("DATETIME", LogContext(), env) == "2026-10-18 19:30"


class TestUserTemplate:
    def test_login_connector_user(self, env, cache_ctx):
        assert _value("USER", cache_ctx, env) == "alice"

    def test_plain_connector_falls_back_to_settings(self, make_env, make_plain_connector):
        env = make_env(make_plain_connector(), user_name="configured")
        ctx = LogContext.for_cache(Cache(geocode="OC1"))
        assert _value("USER", ctx, env) == "configured"

    def test_no_cache_uses_settings(self, env, lookup):
        assert _value("USER", LogContext(), env) == "settings-user"
        assert lookup.lookups == 0

    def test_lookup_error_falls_back_to_settings(self, make_env):
        failing = Mock()
        failing.get_connector.side_effect = ConnectionError("lookup failed")
        env = make_env(connectors=failing, user_name="configured")
        assert _value("USER", LogContext.for_cache(Cache(geocode="GC1")), env) == "configured"


class TestSubjectTemplates:
    def test_owner_precedence(self, env, cache, trackable):
        both = LogContext(cache=cache, trackable=trackable)
        assert _value("OWNER", both, env) == "carol"
        assert _value("OWNER", LogContext.for_cache(cache), env) == "bob"
        assert _value("OWNER", LogContext(), env) == ""

    def test_name_precedence(self, env, cache, trackable):
        both = LogContext(cache=cache, trackable=trackable)
        assert _value("NAME", both, env) == "Travelling Duck"
        assert _value("NAME", LogContext.for_cache(cache), env) == "Hidden Lake"
        assert _value("NAME", LogContext(), env) == ""

    def test_url_precedence(self, env, cache, trackable):
        assert _value("URL", LogContext.for_trackable(trackable), env) == "https://coord.info/TB5678"
        assert _value("URL", LogContext.for_cache(cache), env) == "https://coord.info/GC1234"
        assert _value("URL", LogContext(), env) == ""

    def test_missing_urls_are_empty(self, env):
        assert _value("URL", LogContext.for_cache(Cache(geocode="GC1")), env) == ""
        assert _value("URL", LogContext.for_trackable(Trackable(geocode="TB1")), env) == ""

    def test_log(self, env, log_entry):
        assert _value("LOG", LogContext(log_entry=log_entry), env) == "Found it after a long search."
        assert _value("LOG", LogContext(), env) == ""
        assert _value("LOG", LogContext(log_entry=LogEntry(text="")), env) == ""


class TestLogContext:
    def test_for_cache(self, cache, log_entry):
        ctx = LogContext.for_cache(cache, log_entry, offline=True)
        assert ctx.cache is cache
        assert ctx.trackable is None
        assert ctx.log_entry is log_entry
        assert ctx.offline is True

    def test_for_trackable_is_online(self, trackable):
        ctx = LogContext.for_trackable(trackable)
        assert ctx.trackable is trackable
        assert ctx.cache is None
        assert ctx.offline is False
