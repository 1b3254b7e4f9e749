"""
FILE: Utils/decision_tree.py
-----------------------------
Hand-authored decision tree summarising typical findings for the
student performance dataset. Illustrative content: predictions and
sample counts are fixed, nothing here is fitted to the loaded data.

Branch rule at every decision node: value > threshold → right.
"""

from Schemas.decision_tree import DecisionNode, LeafNode, TreeNode
from Schemas.student import StudentRecord


DECISION_TREE = DecisionNode.model_validate({
    "id": "root",
    "variable": "failures",
    "threshold": 0,
    "label": "Past Failures > 0?",
    "description": "Have you failed any classes before?",
    "left": {
        "kind": "decision",
        "id": "failures-no",
        "variable": "Medu",
        "threshold": 2,
        "label": "Mother's Ed > Middle School?",
        "description": "No prior failures. Check mother's education level.",
        "left": {
            "kind": "decision",
            "id": "medu-low",
            "variable": "studytime",
            "threshold": 2,
            "label": "Study Time > 2-5hrs?",
            "description": "Lower maternal education. Study habits become key.",
            "left": {
                "kind": "leaf", "id": "low-study", "prediction": 9.2, "samples": 45,
                "label": "Predicted: 9.2",
                "description": "At-risk group: low parent ed + low study time",
            },
            "right": {
                "kind": "leaf", "id": "high-study", "prediction": 11.1, "samples": 28,
                "label": "Predicted: 11.1",
                "description": "Study time compensates for lower parent ed",
            },
        },
        "right": {
            "kind": "decision",
            "id": "medu-high",
            "variable": "absences",
            "threshold": 10,
            "label": "Absences > 10?",
            "description": "Higher maternal education. Check attendance.",
            "left": {
                "kind": "leaf", "id": "good-attendance", "prediction": 12.8, "samples": 180,
                "label": "Predicted: 12.8",
                "description": "Strong profile: no failures + educated parent + good attendance",
            },
            "right": {
                "kind": "leaf", "id": "poor-attendance", "prediction": 10.5, "samples": 35,
                "label": "Predicted: 10.5",
                "description": "High absences reduce advantage of good background",
            },
        },
    },
    "right": {
        "kind": "decision",
        "id": "failures-yes",
        "variable": "Walc",
        "threshold": 3,
        "label": "Weekend Alcohol > Moderate?",
        "description": "Has prior failures. Check lifestyle factors.",
        "left": {
            "kind": "decision",
            "id": "low-alcohol",
            "variable": "goout",
            "threshold": 4,
            "label": "Going Out Very High?",
            "description": "Prior failures but controlled alcohol. Check social habits.",
            "left": {
                "kind": "leaf", "id": "moderate-social", "prediction": 8.5, "samples": 52,
                "label": "Predicted: 8.5",
                "description": "Prior failures but manageable lifestyle",
            },
            "right": {
                "kind": "leaf", "id": "high-social", "prediction": 6.8, "samples": 18,
                "label": "Predicted: 6.8",
                "description": "Multiple risk factors compound",
            },
        },
        "right": {
            "kind": "leaf", "id": "high-alcohol", "prediction": 5.9, "samples": 37,
            "label": "Predicted: 5.9",
            "description": "High-risk group: prior failures + high alcohol consumption",
        },
    },
})


def route(student: StudentRecord, tree: TreeNode = DECISION_TREE) -> tuple[list[str], LeafNode]:
    """Walks the tree for one student. Returns (node ids visited, leaf reached)."""
    path: list[str] = []
    node = tree
    while isinstance(node, DecisionNode):
        path.append(node.id)
        value = getattr(student, node.variable)
        node = node.right if value > node.threshold else node.left
    path.append(node.id)
    return path, node


def leaves(tree: TreeNode = DECISION_TREE) -> list[LeafNode]:
    """All leaves, left to right."""
    if isinstance(tree, LeafNode):
        return [tree]
    return leaves(tree.left) + leaves(tree.right)
