"""Templating data for macvlan and IPoIB network attachment definitions."""

from __future__ import annotations

from typing import Any

DEFAULT_NETWORK_NAMESPACE = "default"

# Annotations recording the namespace the network's attachment definition was last created in.
LAST_MACVLAN_NETWORK_NAMESPACE_ANNOT = "operator.macvlannetwork.mellanox.com/last-network-namespace"
LAST_IPOIB_NETWORK_NAMESPACE_ANNOT = "operator.ipoibnetwork.mellanox.com/last-network-namespace"


def format_ipam(ipam: str) -> str:
    """Return the ``"ipam":...`` fragment of a CNI config with all whitespace removed.

    An empty IPAM configuration yields an empty object.
    """
    if ipam:
        return '"ipam":' + "".join(ipam.split())
    return '"ipam":{}'


def _base_network_data(
    name: str, network_namespace: str, master: str, ipam: str
) -> dict[str, Any]:
    return {
        "NetworkName": name,
        "NetworkNamespace": network_namespace or DEFAULT_NETWORK_NAMESPACE,
        "Master": master,
        "Ipam": format_ipam(ipam),
    }


def macvlan_network_data(
    name: str,
    network_namespace: str,
    master: str,
    mode: str,
    mtu: int,
    ipam: str,
) -> dict[str, Any]:
    """Templating data for a macvlan network attachment definition."""
    data = _base_network_data(name, network_namespace, master, ipam)
    data["Mode"] = mode
    data["Mtu"] = mtu
    return data


def ipoib_network_data(
    name: str, network_namespace: str, master: str, ipam: str
) -> dict[str, Any]:
    """Templating data for an IPoIB network attachment definition."""
    return _base_network_data(name, network_namespace, master, ipam)