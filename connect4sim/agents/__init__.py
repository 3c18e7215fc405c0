"""Agent implementations for Connect-4, one per Strategy."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from connect4sim.agents.base import Agent, PromptFn, Strategy
from connect4sim.agents.human import HumanAgent
from connect4sim.agents.lookahead import HeuristicAgent, NaiveAgent, SimpleAgent, TreeAgent
from connect4sim.agents.random_agent import RandomAgent
from connect4sim.engine import GridState

__all__ = [
    "Agent",
    "HeuristicAgent",
    "HumanAgent",
    "NaiveAgent",
    "PromptFn",
    "RandomAgent",
    "SimpleAgent",
    "Strategy",
    "TreeAgent",
    "build_agent",
    "choose_move",
]


def _human(name: str, seed: Optional[int], prompt: Optional[PromptFn]) -> Agent:
    if prompt is None:
        raise ValueError("the human strategy needs a prompt function")
    return HumanAgent(name, prompt)


AGENT_FACTORIES: Dict[Strategy, Callable[[str, Optional[int], Optional[PromptFn]], Agent]] = {
    Strategy.RANDOM: lambda name, seed, prompt: RandomAgent(name, seed=seed),
    Strategy.NAIVE: lambda name, seed, prompt: NaiveAgent(name, seed=seed),
    Strategy.SIMPLE: lambda name, seed, prompt: SimpleAgent(name),
    Strategy.HEURISTIC: lambda name, seed, prompt: HeuristicAgent(name),
    Strategy.MINIMAX: lambda name, seed, prompt: TreeAgent(name),
    Strategy.HUMAN: _human,
}


def build_agent(
    strategy: Strategy,
    name: str,
    *,
    seed: Optional[int] = None,
    prompt: Optional[PromptFn] = None,
) -> Agent:
    factory = AGENT_FACTORIES.get(Strategy(strategy))
    if factory is None:
        raise ValueError(f"unsupported strategy: {strategy}")
    return factory(name, seed, prompt)


def choose_move(
    strategy: Strategy,
    state: GridState,
    symbol: str,
    opponent: str,
    *,
    seed: Optional[int] = None,
    prompt: Optional[PromptFn] = None,
) -> int:
    """One-shot entry point: pick a column for `symbol` with the given strategy."""
    return build_agent(strategy, str(Strategy(strategy).value), seed=seed, prompt=prompt).select_move(
        state, symbol, opponent
    )
