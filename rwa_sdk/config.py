"""
Network configuration for the RWA SDK.

Network presets live in the packaged ``networks.json``. A different file can
be supplied through the ``RWA_NETWORKS_FILE`` environment variable.
"""
import json
import logging
import os
from decimal import Decimal
from importlib import resources
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class NetworkConfig:
    """Lookup of chain presets (RPC endpoint, chain ID, fee settings, contracts)."""

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load all network presets.

        Returns:
            Mapping of network name to its configuration

        Raises:
            ValueError: If the networks file is not valid JSON
        """
        if cls._networks_cache is not None:
            return cls._networks_cache

        custom_path = os.environ.get("RWA_NETWORKS_FILE")
        try:
            if custom_path:
                with open(custom_path, "r", encoding="utf-8") as f:
                    networks = json.load(f)
                logger.debug(f"Loaded networks from {custom_path}")
            else:
                text = resources.files("rwa_sdk").joinpath("networks.json").read_text(encoding="utf-8")
                networks = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid networks configuration: {e}") from e

        cls._networks_cache = networks
        return networks

    @classmethod
    def get_network(cls, network: str) -> Dict[str, Any]:
        """
        Get the configuration of one network.

        Raises:
            ValueError: If the network is unknown
        """
        networks = cls.load_networks()
        if network not in networks:
            available = ", ".join(sorted(networks))
            raise ValueError(f"Unknown network '{network}'. Available networks: {available}")
        return networks[network]

    @classmethod
    def get_rpc_url(cls, network: str, override: Optional[str] = None) -> str:
        """
        Get the RPC URL of a network.

        Precedence: ``override``, then ``<NETWORK>_RPC_URL`` from the environment
        (upper-cased, dashes replaced by underscores), then ``RWA_RPC_URL``,
        then the preset.
        """
        if override:
            return override
        env_var = f"{network.upper().replace('-', '_')}_RPC_URL"
        env_value = os.environ.get(env_var) or os.environ.get("RWA_RPC_URL")
        if env_value:
            return env_value
        return cls.get_network(network)["rpc"]

    @classmethod
    def get_chain_id(cls, network: str) -> str:
        return cls.get_network(network)["chainId"]

    @classmethod
    def get_denom(cls, network: str) -> str:
        return cls.get_network(network)["denom"]

    @classmethod
    def get_gas_price(cls, network: str) -> Union[int, Decimal]:
        """Gas price of a network; non-integer prices are returned as Decimal."""
        value = cls.get_network(network)["gasPrice"]
        if isinstance(value, int):
            return value
        return Decimal(str(value))

    @classmethod
    def get_contract_addresses(cls, network: str) -> Dict[str, str]:
        """Token, identity and compliance contract addresses of a network (may be empty)."""
        config = cls.get_network(network)
        return {
            "token_address": config.get("tokenContract", ""),
            "identity_address": config.get("identityContract", ""),
            "compliance_address": config.get("complianceContract", ""),
        }
