import argparse
import json
from typing import Any, Dict, List, Optional

from tickcount.logger import log

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class ConfigError(Exception):
    pass


MalformedConfig = ConfigError


class Config:

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"
    access_log: bool = True

    def __init__(self, host: Optional[str] = None, port: Optional[int] = None,
                 log_level: Optional[str] = None,
                 access_log: Optional[bool] = None):
        if host is not None:
            self.host = self._check_host(host)
        if port is not None:
            self.port = self._check_port(port)
        if log_level is not None:
            self.log_level = self._check_log_level(log_level)
        if access_log is not None:
            self.access_log = self._check_access_log(access_log)

    @classmethod
    def assimilate(cls, cfg: Any) -> "Config":
        log.debug("config assimilate: {}".format(cfg))
        cfg = cls._get_from_json(cfg)
        return cls(
            host=cfg.get('host'),
            port=cfg.get('port'),
            log_level=cfg.get('log_level'),
            access_log=cfg.get('access_log'),
        )

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "Config":
        parser = argparse.ArgumentParser(
            prog="tickcount",
            description="Serve a shared tick counter over HTTP.")
        parser.add_argument("--host", default=cls.host)
        parser.add_argument("--port", default=cls.port)
        parser.add_argument("--log-level", dest="log_level",
                            default=cls.log_level)
        parser.add_argument("--no-access-log", dest="access_log",
                            action="store_false", default=True)
        args = parser.parse_args(argv)
        return cls.assimilate(vars(args))

    @staticmethod
    def _get_from_json(cfg: Any) -> Dict[str, Any]:
        if isinstance(cfg, str):
            try:
                cfg = json.loads(cfg)
            except json.JSONDecodeError:
                raise ConfigError("malformed json config")
        if not isinstance(cfg, dict):
            raise ConfigError("expected a 'str' or a 'dict'")
        return cfg

    @staticmethod
    def _check_host(host: Any) -> str:
        if not isinstance(host, str) or len(host) == 0:
            raise ConfigError("expecting a non-empty string as host")
        return host

    @staticmethod
    def _check_port(port: Any) -> int:
        if isinstance(port, bool):
            raise ConfigError("invalid port: {}".format(port))
        try:
            port = int(port)
        except (TypeError, ValueError):
            raise ConfigError("invalid port: {}".format(port))
        if not 1 <= port <= 65535:
            raise ConfigError("port out of range: {}".format(port))
        return port

    @staticmethod
    def _check_access_log(access_log: Any) -> bool:
        if not isinstance(access_log, bool):
            raise ConfigError("expecting a boolean as access_log: {}".format(
                access_log))
        return access_log

    @staticmethod
    def _check_log_level(level: Any) -> str:
        if not isinstance(level, str) or level.lower() not in LOG_LEVELS:
            raise ConfigError("unknown log level: {}".format(level))
        return level.lower()

    def to_jsonish(self) -> Dict[str, Any]:
        return {
            'host': self.host,
            'port': self.port,
            'log_level': self.log_level,
            'access_log': self.access_log,
        }
