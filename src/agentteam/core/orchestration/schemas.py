from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from agentteam.core.tools.base import ToolOutcome


class ChatRequest(BaseModel):
    message: str


class ToolCallOutputItem(BaseModel):
    type: Literal["tool_call_output_item"] = "tool_call_output_item"
    agent: str
    output: ToolOutcome


class MessageOutputItem(BaseModel):
    type: Literal["message_output_item"] = "message_output_item"
    agent: str
    content: str


TraceItem = Annotated[Union[ToolCallOutputItem, MessageOutputItem], Field(discriminator="type")]


class RunResult(BaseModel):
    final_output: str = ""
    last_agent: str
    new_items: list[TraceItem] = Field(default_factory=list)


class AgentResponse(BaseModel):
    content: str
    speaker: str


class ChatReply(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response: str
    speaker: str
    tools: list[ToolOutcome] = Field(default_factory=list)
    agent_responses: list[AgentResponse] = Field(default_factory=list, alias="agentResponses")
    handoff_occurred: bool = Field(default=False, alias="handoffOccurred")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
