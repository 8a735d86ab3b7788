"""
Тести для модуля walker

Запуск: pytest tests/test_walker.py -v
Або демо: python tests/test_walker.py
"""

from stack_advisor.catalog import CatalogSource
from stack_advisor.question_engine import QuestionBank, expected_answer
from stack_advisor.schemas import Candidate, Question, ScoringKind, ScoringRule
from stack_advisor.walker import HistoryEntry, SessionStatus, StackWalker


def _stack(name, *tags):
    return Candidate(name=name, tags=tags)


def _four_stacks():
    return [
        _stack("React + Vite", "frontend", "react"),
        _stack("SvelteKit", "frontend", "svelte"),
        _stack("Django", "backend", "python", "django"),
        _stack("Express", "backend", "nodejs"),
    ]


def _bundled_walker():
    return StackWalker.from_catalog(CatalogSource())


def _run_to_end(walker, pick=0):
    """Відповідати answers[pick] поки є питання; повертає список відповідей"""
    answers = []
    question = walker.next_question()
    while question is not None:
        answer = question.answers[min(pick, len(question.answers) - 1)]
        walker.record_answer(question.id, answer)
        answers.append((question.id, answer))
        question = walker.next_question()
    return answers


def test_initial_state():
    """Початковий стан: весь каталог, нічого не задано"""
    walker = StackWalker(_four_stacks())
    state = walker.current_state()

    assert state.remaining_count == 4
    assert state.asked_count == 0
    assert state.history == ()
    assert state.status == SessionStatus.ACTIVE
    assert not state.is_complete
    assert walker.next_question() is not None
    assert walker.final_recommendation() is None


def test_frontend_answer_leaves_two():
    """4 кандидати, 2 з тегом frontend: 'Yes' на primary_focus → ці 2"""
    walker = StackWalker(_four_stacks())

    assert walker.record_answer("primary_focus", "Yes")

    state = walker.current_state()
    assert [c.name for c in state.remaining_candidates] == ["React + Vite", "SvelteKit"]
    assert state.history == (HistoryEntry("primary_focus", "Yes", 2),)


def test_single_candidate_converged_immediately():
    """Один кандидат: питань немає, рекомендація одразу"""
    only = _stack("Django", "python")
    walker = StackWalker([only])

    assert walker.next_question() is None
    assert walker.final_recommendation() is only
    assert walker.current_state().status == SessionStatus.FOUND
    assert walker.current_state().asked_count == 0


def test_undeclared_answer_empties_candidates():
    """Відповідь поза списком → порожній набір, рекомендації немає"""
    walker = StackWalker(_four_stacks())

    assert walker.record_answer("primary_focus", "Maybe")

    state = walker.current_state()
    assert state.remaining_count == 0
    assert walker.final_recommendation() is None
    assert walker.next_question() is None
    assert state.status == SessionStatus.EMPTY


def test_empty_result_completion_readings():
    """
    Нуль кандидатів у двох прочитаннях завершеності:
    - is_complete (<= 1 кандидата) → True
    - is_found (рівно 1 кандидат) → False
    """
    walker = StackWalker(_four_stacks())
    walker.record_answer("primary_focus", "yes")  # регістр не збігається

    state = walker.current_state()
    assert state.is_complete is True
    assert state.is_found is False
    assert state.to_dict()["is_complete"] is True
    assert state.to_dict()["is_found"] is False


def test_found_completion_readings():
    """Один кандидат: обидва прочитання завершеності → True"""
    walker = StackWalker(_four_stacks())
    walker.record_answer("primary_focus", "Yes")
    walker.record_answer("interactive_ui", "Yes")   # обидва react/svelte → Yes
    walker.record_answer("javascript_ecosystem", "Yes")  # тільки react

    state = walker.current_state()
    assert state.remaining_count == 1
    assert state.is_complete is True
    assert state.is_found is True
    assert state.status == SessionStatus.FOUND
    assert walker.final_recommendation().name == "React + Vite"


def test_exhausted_with_tied_candidates():
    """Однакові кандидати: банк вичерпано, рекомендації немає"""
    twins = [_stack("Twin A", "python", "django"), _stack("Twin B", "python", "django")]
    walker = StackWalker(twins)
    bank = walker.question_bank

    question = walker.next_question()
    while question is not None:
        # Відповідь, яку дали б обидва кандидати
        walker.record_answer(question.id, expected_answer(question, twins[0]))
        question = walker.next_question()

    state = walker.current_state()
    assert state.remaining_count == 2
    assert state.asked_count == len(bank)
    assert state.status == SessionStatus.EXHAUSTED
    assert not state.is_complete
    assert walker.next_question() is None
    assert walker.final_recommendation() is None


def test_next_question_none_only_when_finished():
    """Питання є, поки статус ACTIVE, навіть якщо gain = 0"""
    question = Question(
        id="python",
        text="Do you prefer Python?",
        answers=("Yes", "No"),
        scoring=ScoringRule(ScoringKind.HAS_TAG, tags=("python",)),
    )
    stacks = [_stack("Django", "python"), _stack("Express", "nodejs")]
    walker = StackWalker(stacks, question_bank=QuestionBank([question]))

    assert walker.status == SessionStatus.ACTIVE
    assert walker.next_question() is question

    walker.record_answer("python", "No")

    assert walker.next_question() is None
    assert walker.status == SessionStatus.FOUND
    assert walker.final_recommendation().name == "Express"


def test_unknown_question_is_noop():
    """Невідомий id: стан не змінюється"""
    walker = StackWalker(_four_stacks())

    assert walker.record_answer("no_such_question", "Yes") is False

    state = walker.current_state()
    assert state.remaining_count == 4
    assert state.asked_count == 0
    assert state.history == ()


def test_repeated_question_is_noop():
    """Повторна відповідь на те саме питання ігнорується"""
    walker = StackWalker(_four_stacks())
    walker.record_answer("primary_focus", "Yes")

    assert walker.record_answer("primary_focus", "No") is False

    state = walker.current_state()
    assert state.remaining_count == 2
    assert len(state.history) == state.asked_count == 1


def test_history_matches_asked_and_monotonic():
    """len(history) == asked_count, кандидатів не більшає"""
    walker = _bundled_walker()
    previous = walker.current_state().remaining_count

    question = walker.next_question()
    while question is not None:
        walker.record_answer(question.id, question.answers[-1])
        state = walker.current_state()

        assert len(state.history) == state.asked_count
        assert state.remaining_count <= previous
        assert set(state.remaining_candidates) <= set(walker.all_candidates)
        assert question.id in walker.asked_question_ids

        previous = state.remaining_count
        question = walker.next_question()

    assert walker.current_state().status != SessionStatus.ACTIVE


def test_reset_and_replay():
    """reset() + ті самі відповіді → та сама історія та рекомендація"""
    walker = _bundled_walker()
    answers = _run_to_end(walker)
    history = walker.current_state().history
    recommendation = walker.final_recommendation()

    walker.reset()
    walker.reset()  # ідемпотентно

    state = walker.current_state()
    assert state.remaining_count == len(walker.all_candidates)
    assert state.asked_count == 0
    assert state.history == ()

    for question_id, answer in answers:
        walker.record_answer(question_id, answer)

    assert walker.current_state().history == history
    assert walker.final_recommendation() == recommendation


def test_independent_walkers_agree():
    """Два незалежні walkers з однаковими відповідями дають однаковий результат"""
    first = _bundled_walker()
    second = _bundled_walker()

    answers_first = _run_to_end(first, pick=1)
    answers_second = _run_to_end(second, pick=1)

    assert answers_first == answers_second
    assert first.current_state().history == second.current_state().history
    assert first.final_recommendation() == second.final_recommendation()


def test_empty_catalog():
    """Порожній каталог: ні питань, ні рекомендації"""
    walker = StackWalker([])

    assert walker.next_question() is None
    assert walker.final_recommendation() is None
    assert walker.current_state().status == SessionStatus.EMPTY


def test_custom_bank_and_path_summary():
    """Власний банк питань та підсумок шляху"""
    question = Question(
        id="python",
        text="Do you prefer Python?",
        answers=("Yes", "No"),
        scoring=ScoringRule(ScoringKind.HAS_TAG, tags=("python",)),
    )
    walker = StackWalker(_four_stacks(), question_bank=QuestionBank([question]))

    assert walker.next_question() is question
    walker.record_answer("python", "Yes")

    assert walker.final_recommendation().name == "Django"
    assert walker.path_summary() == ["Do you prefer Python? → Yes"]


def test_from_tree():
    """Створення walker з дерева рішень"""
    tree = {
        "start": {
            "id": "start",
            "question": "Frontend?",
            "options": [
                {"text": "Yes", "nextId": "a"},
                {"text": "No", "nextId": "b"},
            ],
        },
        "a": {"id": "a", "result": {"name": "SvelteKit", "tags": ["frontend"]}},
        "b": {"id": "b", "result": {"name": "Flask", "tags": ["backend"]}},
    }
    walker = StackWalker.from_tree(tree)

    assert [c.name for c in walker.all_candidates] == ["SvelteKit", "Flask"]

    walker.record_answer("primary_focus", "No")
    assert walker.final_recommendation().name == "Flask"


def demo():
    """Демонстрація сесії на вбудованому каталозі"""
    print("=" * 60)
    print("StackAdvisor — Демонстрація Walker")
    print("=" * 60)

    walker = _bundled_walker()
    print(f"Кандидатів: {len(walker.all_candidates)}")

    _run_to_end(walker)
    for line in walker.path_summary():
        print(f"  {line}")

    state = walker.current_state()
    print(f"\nСтатус: {state.status.value}")
    recommendation = walker.final_recommendation()
    if recommendation:
        print(f"Рекомендація: {recommendation.name}")


if __name__ == "__main__":
    demo()
