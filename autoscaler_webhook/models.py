"""
Embed message data models
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class EmbedField:
    """A single named field of an embed"""
    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "value": self.value}
        if self.inline:
            data["inline"] = True
        return data


@dataclass
class EmbedMessage:
    """Rich message block posted to the autoscaler webhook input"""
    color: int = 0
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    footer: Optional[str] = None
    fields: List[EmbedField] = field(default_factory=list)

    def add_field(self, name: str, value: str, inline: bool = False) -> None:
        self.fields.append(EmbedField(name=name, value=value, inline=inline))

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def to_dict(self) -> Dict[str, Any]:
        embed: Dict[str, Any] = {"color": self.color}
        if self.url is not None:
            embed["url"] = self.url
        if self.title is not None:
            embed["title"] = self.title
        if self.description is not None:
            embed["description"] = self.description
        if self.fields:
            embed["fields"] = [f.to_dict() for f in self.fields]
        if self.footer is not None:
            embed["footer"] = {"text": self.footer}
        return embed

    def to_payload(self) -> Dict[str, Any]:
        """Request body: a single embed wrapped the way Discord webhooks expect it"""
        return {"embeds": [self.to_dict()]}
