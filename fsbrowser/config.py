from dataclasses import dataclass

import yaml


@dataclass
class ServerConfig:
    """Server configuration.

    Attributes
    ----------
    root : str
        Served folder path.
    host : str
        Bind address.
    port : int
        Bind port.
    sort_children : bool
        Sort listed directory entries by name.
    log_level : str
        Logging level name.
    """

    root: str = ''
    host: str = '0.0.0.0'
    port: int = 8080
    sort_children: bool = True
    log_level: str = 'INFO'

    def __post_init__(self) -> None:
        try:
            port = int(self.port)
        except (TypeError, ValueError):
            raise ValueError(f"invalid port: '{self.port}'") from None
        if isinstance(self.port, bool) or not 0 < port < 65536:
            raise ValueError(f"invalid port: '{self.port}'")
        self.port = port

    @classmethod
    def from_yaml(cls, path: str) -> 'ServerConfig':
        """Creates class instance from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.

        Returns
        -------
        ServerConfig
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        return cls(**config)
