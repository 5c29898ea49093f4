from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from .probe import Shape
from .validators import (
    Validator,
    bandwidth_nonzero,
    checkpoint_level_positive,
    ddb_active,
    first_worker_running,
    worker_running,
)


@dataclass(frozen=True)
class CheckDefinition:
    name: str
    path_template: str
    shape: Shape
    validators: tuple[Validator, ...] = ()

    def path(self, chain: str) -> str:
        return self.path_template.replace("{chain}", quote(chain, safe=""))


# Registration order is the execution order.
CHECKS: tuple[CheckDefinition, ...] = (
    CheckDefinition("known_heads_of_chain", "/chains/{chain}/blocks", Shape.ARRAY),
    CheckDefinition("head_block_details", "/chains/{chain}/blocks/head", Shape.OBJECT),
    CheckDefinition("chain_identifier", "/chains/{chain}/chain_id", Shape.STRING),
    CheckDefinition(
        "current_checkpoint",
        "/chains/{chain}/checkpoint",
        Shape.OBJECT,
        (checkpoint_level_positive,),
    ),
    CheckDefinition("rpc_docs", "/describe?recurse=true", Shape.OBJECT),
    CheckDefinition("list_p2p_connections", "/network/connections", Shape.ARRAY),
    CheckDefinition("list_peers", "/network/peers", Shape.ARRAY),
    CheckDefinition("list_pool_connection_points", "/network/points", Shape.ARRAY),
    CheckDefinition("self_peer_id", "/network/self", Shape.STRING),
    CheckDefinition("node_bandwidth_stats", "/network/stat", Shape.OBJECT, (bandwidth_nonzero,)),
    CheckDefinition("supported_network_version", "/network/version", Shape.OBJECT),
    CheckDefinition("list_protocols", "/protocols", Shape.ARRAY),
    CheckDefinition("garbage_collector_stats", "/stats/gc", Shape.OBJECT),
    CheckDefinition("memory_usage_stats", "/stats/memory", Shape.OBJECT),
    CheckDefinition("block_validator_worker_state", "/workers/block_validator", Shape.OBJECT, (worker_running,)),
    CheckDefinition("list_chain_validators", "/workers/chain_validators", Shape.ARRAY),
    CheckDefinition(
        "chain_validator_worker_state",
        "/workers/chain_validators/{chain}",
        Shape.OBJECT,
        (worker_running,),
    ),
    CheckDefinition("worker_ddb_state", "/workers/chain_validators/{chain}/ddb", Shape.OBJECT, (ddb_active,)),
    CheckDefinition(
        "list_validator_workers",
        "/workers/chain_validators/{chain}/peers_validators",
        Shape.ARRAY,
    ),
    CheckDefinition("list_prevalidators", "/workers/prevalidators", Shape.ARRAY, (first_worker_running,)),
    CheckDefinition(
        "state_of_prevalidator",
        "/workers/prevalidators/{chain}",
        Shape.OBJECT,
        (worker_running,),
    ),
)
