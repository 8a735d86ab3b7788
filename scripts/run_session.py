#!/usr/bin/env python3
"""
StackAdvisor — Інтерактивна сесія в консолі

Запуск:
    python scripts/run_session.py
    python scripts/run_session.py --tree data/tree.json --config config.yaml
"""

import argparse
import logging

from stack_advisor.catalog import CatalogSource
from stack_advisor.config import get_default_config, load_config
from stack_advisor.question_engine import minimum_questions
from stack_advisor.walker import StackWalker, SessionStatus


def ask(question) -> str:
    """Показати питання та прочитати номер відповіді"""
    print(f"\n{question.text}")
    if question.description:
        print(f"  ({question.description})")
    for i, answer in enumerate(question.answers, 1):
        print(f"  {i}. {answer}")

    while True:
        raw = input("> ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(question.answers):
            return question.answers[int(raw) - 1]
        print(f"Введіть число від 1 до {len(question.answers)}")


def main():
    parser = argparse.ArgumentParser(description='StackAdvisor interactive session')
    parser.add_argument('--tree', default=None, help='Decision tree JSON (default: bundled)')
    parser.add_argument('--config', default=None, help='YAML config')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args()

    config = load_config(args.config) if args.config else get_default_config()

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.log_level)

    source = CatalogSource(args.tree or config.catalog.tree_path, config.catalog.validate_on_load)
    walker = StackWalker.from_catalog(source, config=config.question_engine)

    print("=" * 60)
    print(f"{config.project_name} — {len(walker.all_candidates)} stacks")
    print(f"Мінімум питань: {minimum_questions(len(walker.all_candidates))}")
    print("=" * 60)

    question = walker.next_question()
    while question is not None:
        walker.record_answer(question.id, ask(question))
        print(f"  → залишилось: {len(walker.remaining_candidates)}")
        question = walker.next_question()

    print("\n" + "=" * 60)
    for line in walker.path_summary():
        print(f"  {line}")

    state = walker.current_state()
    if state.status == SessionStatus.FOUND:
        stack = walker.final_recommendation()
        print(f"\nРекомендація: {stack.name}")
        print(f"  {stack.description}")
        print(f"  {stack.url}")
        for reason in stack.reasons:
            print(f"  • {reason}")
    elif state.status == SessionStatus.EXHAUSTED:
        print("\nПитання закінчились, кілька варіантів рівноцінні:")
        for candidate in state.remaining_candidates:
            print(f"  • {candidate.name}")
    else:
        print("\nЖоден stack не відповідає всім відповідям.")


if __name__ == "__main__":
    main()
