from __future__ import annotations

from agentteam.core.agents.definitions import ROUTING_AGENT_NAME

from .schemas import AgentResponse, ChatReply, MessageOutputItem, RunResult, ToolCallOutputItem


def delegation_notice(agent_name: str) -> str:
    return f"{agent_name}に依頼いたします。"


def shape_reply(result: RunResult, routing_agent: str = ROUTING_AGENT_NAME) -> ChatReply:
    """Collapse one run into the reply the chat client renders.

    Tool outputs are kept in execution order whoever produced them. Messages
    written by the routing agent are dropped from ``agent_responses`` because
    they already surface as ``response``. When the run ended on a delegate,
    ``response`` is a fixed delegation notice instead of the model's text.
    """
    tools = []
    agent_responses = []
    for item in result.new_items:
        if isinstance(item, ToolCallOutputItem):
            tools.append(item.output)
        elif isinstance(item, MessageOutputItem) and item.agent != routing_agent:
            agent_responses.append(AgentResponse(content=item.content, speaker=item.agent))

    handoff_occurred = result.last_agent != routing_agent
    response = delegation_notice(result.last_agent) if handoff_occurred else result.final_output
    return ChatReply(
        response=response,
        speaker=routing_agent,
        tools=tools,
        agent_responses=agent_responses,
        handoff_occurred=handoff_occurred,
    )
