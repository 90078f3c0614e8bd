from .definitions import ROUTING_AGENT_NAME, AgentDefinition, AgentGraph, build_agent_graph

__all__ = ["ROUTING_AGENT_NAME", "AgentDefinition", "AgentGraph", "build_agent_graph"]
