"""
Public address discovery for this host.

IPv4 is asked of an external "what is my IP" service; IPv6 is read from the
local interface table, since a global IPv6 address is usually assigned to
the host directly.
"""

from __future__ import annotations

import ipaddress
import socket
import urllib.error
import urllib.request

import psutil

from ..core.di import get_logger
from ..core.exceptions import IPNotFoundError, RealIPRequestError, UnknownAddressFamilyError
from ..core.models.config import RealIPConfig


def _is_global_unicast(address: ipaddress.IPv6Address) -> bool:
    return not (
        address.is_loopback
        or address.is_link_local
        or address.is_multicast
        or address.is_unspecified
    )


def _fetch_ipv4(url: str, timeout: float) -> list[str]:
    req = urllib.request.Request(url, headers={"User-Agent": "curl/8"})
    get_logger().debug("Real IP request: GET %s (timeout %ss)", url, timeout)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            body = resp.read().decode().strip()
    except urllib.error.HTTPError as e:
        raise RealIPRequestError(f"HTTP {e.code}: {e.reason}", url=url, cause=e) from e
    except urllib.error.URLError as e:
        raise RealIPRequestError(
            f"Send request error: {e.reason}", url=url, timeout=timeout, cause=e
        ) from e
    except UnicodeDecodeError as e:
        raise RealIPRequestError(f"Read body error: {e}", url=url, cause=e) from e
    except OSError as e:
        raise RealIPRequestError(
            f"Read body error: {e}", url=url, timeout=timeout, cause=e
        ) from e
    if not body:
        raise IPNotFoundError(context={"url": url})
    return [body]


def _interface_ipv6_addresses() -> list[str]:
    ips: list[str] = []
    try:
        interfaces = psutil.net_if_addrs()
    except OSError as e:
        raise RealIPRequestError(f"Get interface addrs error: {e}", cause=e) from e
    for addrs in interfaces.values():
        for addr in addrs:
            if addr.family != socket.AF_INET6:
                continue
            # Scoped addresses carry a "%iface" suffix
            text = addr.address.split("%", 1)[0]
            try:
                ip = ipaddress.IPv6Address(text)
            except ValueError:
                continue
            if _is_global_unicast(ip) and ip.ipv4_mapped is None:
                ips.append(str(ip))
    return ips


def get_real_ip(
    family: int,
    timeout: float | None = None,
    config: RealIPConfig | None = None,
) -> list[str]:
    """
    Get the addresses this host is reachable at.

    Args:
        family: socket.AF_INET or socket.AF_INET6
        timeout: Seconds to wait for the IPv4 lookup service (defaults to
            realip.timeout)
        config: Real IP configuration section (defaults to loaded settings)

    Returns:
        One address for AF_INET; every global unicast address for AF_INET6

    Raises:
        UnknownAddressFamilyError: For any other family
        RealIPRequestError: If the lookup service or interface table fails
        IPNotFoundError: If no address of the family was found
    """
    if family not in (socket.AF_INET, socket.AF_INET6):
        raise UnknownAddressFamilyError(family=family)

    if family == socket.AF_INET:
        if config is None:
            from ..core.settings import load_settings

            config = load_settings().realip
        return _fetch_ipv4(config.ipv4_url, timeout if timeout is not None else config.timeout)

    ips = _interface_ipv6_addresses()
    if not ips:
        raise IPNotFoundError()
    return ips
