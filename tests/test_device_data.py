import pytest

from netop.nodeinfo.attributes import NODE_LABEL_CUDA_VERSION_MAJOR, NODE_LABEL_OS_NAME, Node
from netop.nodeinfo.node_info import Provider
from netop.state.device_data import (
    RESOURCE_NAME_PREFIX,
    host_device_resource_name,
    should_ignore_nv_peer_status,
)


def _node(name, cuda=None):
    labels = {NODE_LABEL_OS_NAME: "ubuntu"}
    if cuda is not None:
        labels[NODE_LABEL_CUDA_VERSION_MAJOR] = cuda
    return Node(name=name, labels=labels)


def test_resource_name_without_prefix_gets_prefix():
    result = host_device_resource_name("test_resource_without_prefix")
    assert result == "nvidia.com/test_resource_without_prefix"
    assert result.count(RESOURCE_NAME_PREFIX) == 1


def test_resource_name_with_prefix_unchanged():
    name = RESOURCE_NAME_PREFIX + "test_resource_with_prefix"
    result = host_device_resource_name(name)
    assert result == "nvidia.com/test_resource_with_prefix"
    assert result.count(RESOURCE_NAME_PREFIX) == 1


def test_empty_resource_name():
    assert host_device_resource_name("") == "nvidia.com/"


def test_no_nodes_does_not_ignore():
    assert should_ignore_nv_peer_status(Provider([])) is False


def test_nodes_without_driver_label_do_not_ignore():
    provider = Provider([_node("n1"), _node("n2")])
    assert should_ignore_nv_peer_status(provider) is False


def test_all_new_drivers_ignore():
    provider = Provider([_node("n1", "465"), _node("n2", "470")])
    assert should_ignore_nv_peer_status(provider) is True


def test_old_driver_does_not_ignore():
    provider = Provider([_node("n1", "465"), _node("n2", "460")])
    assert should_ignore_nv_peer_status(provider) is False


def test_nodes_without_label_are_skipped():
    provider = Provider([_node("n1"), _node("n2", "470")])
    assert should_ignore_nv_peer_status(provider) is True


@pytest.mark.parametrize("value", ["", "abc", " 470", "4.70", "470x"])
def test_unreadable_version_does_not_ignore(value):
    provider = Provider([_node("n1", "470"), _node("n2", value)])
    assert should_ignore_nv_peer_status(provider) is False


def test_signed_version_is_read():
    provider = Provider([_node("n1", "+470")])
    assert should_ignore_nv_peer_status(provider) is True