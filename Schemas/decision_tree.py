"""
FILE: Schemas/decision_tree.py
-------------------------------
Tagged union for the illustrative decision tree.
The tree is hand-authored content, not learned from data.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class LeafNode(BaseModel):
    kind: Literal["leaf"] = "leaf"
    id:          str
    label:       str
    description: str
    prediction:  float      # predicted final grade
    samples:     int


class DecisionNode(BaseModel):
    kind: Literal["decision"] = "decision"
    id:          str
    label:       str
    description: str
    variable:    str
    threshold:   float      # value > threshold → right branch
    left:  "TreeNode"
    right: "TreeNode"


TreeNode = Annotated[Union[LeafNode, DecisionNode], Field(discriminator="kind")]

DecisionNode.model_rebuild()
