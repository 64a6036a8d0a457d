# netop

Building blocks for reconciling cluster network components:

- **Node information** (`netop.nodeinfo`): read well-known attributes
  (hostname, CPU architecture, OS name and version, CUDA driver major
  version) from node labels, and filter nodes by label.
- **Manifest rendering** (`netop.render`): render Jinja2-templated YAML or
  JSON files into a list of object dictionaries.
- **States** (`netop.state`): a `StateManager` runs a sequence of states,
  collects each one's result and reports the overall status, plus helpers
  that build templating data for network attachment definitions.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and call pytest:

```
pip install ".[test]"
pytest
```

## Node information

```python
from netop.nodeinfo.attributes import AttributeType, Node
from netop.nodeinfo.filter import NodeLabelFilterBuilder
from netop.nodeinfo.node_info import Provider

nodes = [
    Node(name="node-1", labels={
        "kubernetes.io/arch": "amd64",
        "feature.node.kubernetes.io/pci-15b3.present": "true",
    }),
    Node(name="node-2", labels={"kubernetes.io/arch": "arm64"}),
]

nic_nodes = (
    NodeLabelFilterBuilder()
    .with_label("feature.node.kubernetes.io/pci-15b3.present", "true")
    .build()
)
provider = Provider(nodes)
for attrs in provider.get_nodes_attributes(nic_nodes):
    print(attrs.name, attrs.attributes.get(AttributeType.CPU_ARCH))
```

`node_attributes(node)` collects every attribute whose label the node
carries; a missing required label is logged as a warning and the attribute
is simply left out. `NodeAttributes.from_label` raises `MissingLabelError`
when the label is absent.

`NodeLabelNoValFilterBuilder` matches nodes on whether a label is present,
whatever its value. Both builders support `with_label`, `build` and `reset`.
`Provider.get_nodes_attributes` applies the filters it is given one after
another.

## Rendering manifests

```python
from netop.render import Renderer, TemplatingData

renderer = Renderer(["manifests/10-daemonset.yaml"])
objects = renderer.render_objects(TemplatingData(data={"Namespace": "network"}))
```

Files are rendered in the order given. `TemplatingData.data` may be a
mapping, a dataclass instance or any object with attributes; its fields
become template variables. Templates can use `yaml`, `quote`, `indent`,
`nindent` and `nindentPrefix`, both as functions and as filters, together
with any extra functions passed in `TemplatingData.funcs`. The same helpers
are available in Python as `indent`, `nindent` and `nindent_prefix`.

A rendered file may hold several YAML documents or several JSON objects.
Empty documents and documents without a `kind` are left out. A file that
cannot be read, a template that does not parse, an undefined variable, or
output that is not valid YAML/JSON objects raises `RenderError`.

## States

```python
from netop.state.manager import StateManager
from netop.state.state import FixedState, SyncState

manager = StateManager([
    FixedState("multus", "multus CNI", SyncState.READY),
    FixedState("ofed", "OFED driver", SyncState.NOT_READY),
])
results = manager.sync_state(None, None)
print(results.status.value)      # notReady
for result in results.states_status:
    print(result.state_name, result.status.value)
```

Subclass `State` and implement `sync` and `get_watch_sources` to write your
own. A `sync` that fails raises `SyncError`; the manager records its status
and the error in that state's `Result` and carries on with the next state.
The overall status is `READY` only when no state is `NOT_READY` or `ERROR`.
`StateManager.get_watch_sources` merges the watch sources of all states,
keeping the first one for a repeated kind name.

`InfoCatalog` hands extra information to states while they sync; add a node
information `Provider` under `InfoType.NODE_INFO` and read it back with
`get_node_info_provider()` (which returns `None` if none was added).

### Templating data helpers

- `netop.state.network_data`: `macvlan_network_data(...)` and
  `ipoib_network_data(...)` build the variables for a network attachment
  definition template; an empty namespace becomes `"default"`, and
  `format_ipam` turns an IPAM configuration into a whitespace-free
  `"ipam":...` fragment (`"ipam":{}` when empty).
- `netop.state.device_data`: `host_device_resource_name` adds the
  `nvidia.com/` prefix to a resource name that lacks it, and
  `should_ignore_nv_peer_status(provider)` tells whether every node that
  reports a CUDA driver major version reports 465 or later.

## What the package does not do

It does not connect to a cluster: there is no API client, nothing creates,
updates or deletes objects, and no component-specific states are included.
Rendered objects are returned as plain dictionaries for the caller to apply.
There is no command-line program.