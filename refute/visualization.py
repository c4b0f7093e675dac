"""
Visualization and reporting utilities.
"""

from .core.state import Outcome, Session


def print_session(session: Session):
    """Print a summary of the current search state."""
    print(f"\n{'='*60}")
    print(f"Step: {session.step}")
    print(f"Worklist ({len(session.worklist)}):")
    for clause in session.worklist:
        derivation = session.parents.get(clause)
        src = f" (from {derivation.left} + {derivation.right})" if derivation else ""
        print(f"  {clause}{src}")
    print(f"Indexed ({len(session.index)}):")
    for clause in session.index:
        print(f"  {clause}")
    if session.halted:
        print(f"Halted: {session.halt_reason}")
    print(f"{'='*60}")


def print_history(session: Session):
    """Print the per-step resolution history."""
    print(f"\n{'='*60}")
    print("Resolution history:")
    print(f"{'='*60}")
    for entry in session.history:
        produced = ", ".join(entry["produced"]) if entry["produced"] else "(nothing new)"
        skipped = ""
        if entry["tautologies"] or entry["duplicates"]:
            skipped = f"  [skipped {entry['tautologies']} tautologies, {entry['duplicates']} duplicates]"
        print(f"  Step {entry['step']}: Focused on {entry['focus']} -> {produced}{skipped}")


def proof_dot(outcome: Outcome) -> str:
    """Render the proof DAG of an outcome in Graphviz DOT."""
    out = ["digraph proof {", "  rankdir=BT;", "  node [shape=box, style=rounded];"]
    used = set()
    for line in outcome.transcript:
        used.update(line.parents)
    for line in outcome.lines:
        if line.parents or line.number in used:
            label = f"{line.number}. {line.clause}"
            color = "lightgray" if not line.parents else "lightblue"
            if line.clause.is_empty:
                color = "salmon"
            out.append(f'  n{line.number} [label="{label}", fillcolor={color}, style=filled];')
        for parent in line.parents:
            out.append(f"  n{parent} -> n{line.number};")
    out.append("}")
    return "\n".join(out) + "\n"


def export_dot(outcome: Outcome, path="proof.dot", verbose: bool = True):
    """Export the proof DAG as a DOT file for Graphviz visualization."""
    with open(path, "w") as f:
        f.write(proof_dot(outcome))
    if verbose:
        print(f"Graph exported to {path}")
