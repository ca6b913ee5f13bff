# ============== accounting_game/ui/app.py ==============

import streamlit as st
import traceback
import sys
import os

# ----------------------------------------------------------------------
# path setup (streamlit run executes this file as a script)
# ----------------------------------------------------------------------
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(os.path.dirname(current_dir))
if project_root not in sys.path:
    sys.path.append(project_root)

from accounting_game.config.params import load_params
from accounting_game.core.content.learning_content import (
    COACH_STEPS,
    EXAM_CHECKLIST,
    MEMORIZE,
    PATTERNS,
    QUEST_STAGES,
    QUICK_SHEET,
    STUDY_PLAN,
)
from accounting_game.core.finance.equation import equation_frame
from accounting_game.core.ledger.accounts import ACCOUNT_KEYS, ACCOUNT_LABELS
from accounting_game.core.quiz.quiz import QuizSession
from accounting_game.core.reporting.formatting import fmt_money, format_amount_column
from accounting_game.core.simulation.navigation import clamp_index
from accounting_game.core.simulation.session import GameSession
from accounting_game.logging_setup import configure_logging, get_logger

PARAMS = load_params()
logger = get_logger("accounting_game.ui")

TAB_NAMES = {"quest": "Quest", "lab": "Equation Lab", "quick": "Quick Sheet", "practice": "Practice"}

# input grid: left column = assets + liabilities, right = equity
LEFT_ACCOUNTS = ("cash", "supplies", "equipment", "ar", "ap", "notes")
RIGHT_ACCOUNTS = ("capital", "withdrawals", "revenue", "expense")


def delta_key(account: str) -> str:
    return f"delta_{account}"


# ----------------------------------------------------------------------
# CSS
# ----------------------------------------------------------------------
def inject_global_css():
    st.markdown(
        """
        <style>
        .aq-card {
            background-color: #f4f5f7;
            border-left: 4px solid #2c3e50;
            padding: 12px 16px;
            margin-bottom: 10px;
            border-radius: 8px;
        }
        .aq-label {
            font-size: 0.8rem;
            font-weight: 700;
            color: #666;
            letter-spacing: 0.04em;
        }
        .aq-value {
            font-size: 1.3rem;
            font-weight: 800;
            color: #111;
            font-variant-numeric: tabular-nums;
        }
        .aq-pill {
            display: inline-block;
            border: 1px solid #ccc;
            border-radius: 999px;
            padding: 2px 12px;
            margin: 2px 4px 2px 0;
            font-size: 0.8rem;
        }
        .aq-balance-check {
            font-size: 1.1rem;
            font-weight: 800;
            padding: 10px 14px;
            border-radius: 8px;
            margin-top: 8px;
            font-family: monospace;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def card(label, value):
    return (
        f'<div class="aq-card"><div class="aq-label">{label}</div>'
        f'<div class="aq-value">{value}</div></div>'
    )


def pill(text):
    return f'<span class="aq-pill">{text}</span>'


def md(text):
    # "$" pairs render as LaTeX in st.markdown
    return str(text).replace("$", "\\$")


# ----------------------------------------------------------------------
# session state
# ----------------------------------------------------------------------
def init_state():
    if "game" not in st.session_state:
        st.session_state["game"] = GameSession()
    if "quiz" not in st.session_state:
        st.session_state["quiz"] = QuizSession()
    st.session_state.setdefault("coach_step", 0)
    st.session_state.setdefault("quest_stage", 0)
    st.session_state.setdefault("quest_pointer", None)
    for k in ACCOUNT_KEYS:
        st.session_state.setdefault(delta_key(k), "")


def _game() -> GameSession:
    return st.session_state["game"]


def _quiz() -> QuizSession:
    return st.session_state["quiz"]


# ----------------------------------------------------------------------
# lab callbacks (run before the rerun renders widgets)
# ----------------------------------------------------------------------
def _sync_entries():
    _game().set_entries({k: st.session_state.get(delta_key(k), "") for k in ACCOUNT_KEYS})


def _reset_view_inputs():
    for k in ACCOUNT_KEYS:
        st.session_state[delta_key(k)] = ""
    st.session_state["coach_step"] = 0


def on_submit():
    _sync_entries()
    _game().submit()


def on_check_only():
    _sync_entries()
    _game().check_only()


def on_clear():
    _game().clear()
    _reset_view_inputs()


def on_next_txn():
    _game().next()
    _reset_view_inputs()


def on_prev_txn():
    _game().previous()
    _reset_view_inputs()


def on_jump_txn(index):
    _game().jump_to(index)
    _reset_view_inputs()


def on_reset_all():
    _game().reset_all()
    _reset_view_inputs()


def on_coach(step_delta):
    if step_delta == 0:
        st.session_state["coach_step"] = 0
        return
    st.session_state["coach_step"] = clamp_index(
        st.session_state["coach_step"] + step_delta, PARAMS.ui.coach_step_count
    )


# ----------------------------------------------------------------------
# 1. Equation scoreboard
# ----------------------------------------------------------------------
def render_equation_panel(game: GameSession):
    eq = game.equation()
    frame = equation_frame(game.running)

    head_l, head_r = st.columns([3, 1])
    head_l.subheader("🧮 Equation Scoreboard")
    if eq.balanced:
        head_r.success("Balanced")
    else:
        head_r.error(md(f"Not balanced (off by {fmt_money(eq.difference)})"))

    cols = st.columns(3)
    for col, (section, total) in zip(
        cols,
        (("ASSETS", eq.assets), ("LIABILITIES", eq.liabilities), ("EQUITY", eq.equity)),
    ):
        with col:
            st.markdown(card(section, fmt_money(total)), unsafe_allow_html=True)
            rows = frame[frame["section"].str.upper() == section][["label", "amount"]]
            st.dataframe(
                format_amount_column(rows).set_index("label"),
            )

    st.markdown(
        pill("Assets = Cash + Supplies + Equipment + A/R")
        + pill("Liabilities = A/P + Notes")
        + pill("Equity = Capital + Revenues − Expenses − Withdrawals"),
        unsafe_allow_html=True,
    )
    style = "background:#e6f4ea;color:#1e4620;" if eq.balanced else "background:#fdecea;color:#611a15;"
    st.markdown(
        f"""
        <div class="aq-balance-check" style="{style}">
            Check: {fmt_money(eq.assets)} = {fmt_money(eq.liabilities)} + {fmt_money(eq.equity)}
        </div>
        """,
        unsafe_allow_html=True,
    )


# ----------------------------------------------------------------------
# 2. Transaction challenge
# ----------------------------------------------------------------------
def render_transaction_challenge(game: GameSession):
    txn = game.current_transaction
    eq = game.equation()

    head_l, head_r = st.columns([3, 1])
    head_l.subheader("🧠 Transaction Challenge")
    head_r.caption(f"{txn.id} / {game.bank.size()}")

    st.progress(game.progress_percent())
    st.markdown(f"**{txn.title}**")
    st.markdown(md(txn.story))
    st.caption(
        f"Amount: {md(fmt_money(txn.amount))} · Scoreboard: {'Balanced' if eq.balanced else 'Fix it'}"
    )
    st.button("↺ Clear", key="lab_clear", on_click=on_clear)

    col_l, col_r = st.columns(2)
    for col, accounts in ((col_l, LEFT_ACCOUNTS), (col_r, RIGHT_ACCOUNTS)):
        with col:
            for k in accounts:
                st.text_input(
                    f"{ACCOUNT_LABELS[k]} (Δ)",
                    key=delta_key(k),
                    placeholder="0",
                    help="Use negative for decrease (e.g., -1000).",
                )

    b1, b2, b3, b4, b5 = st.columns(5)
    b1.button("Check & Apply →", key="lab_submit", type="primary", on_click=on_submit)
    b2.button("Check Only", key="lab_check", on_click=on_check_only)
    b3.button("← Previous", key="lab_prev", on_click=on_prev_txn)
    b4.button(
        "Next →",
        key="lab_next",
        type="primary" if game.ready_for_next else "secondary",
        on_click=on_next_txn,
    )
    b5.button("Reset Game", key="lab_reset", on_click=on_reset_all)

    render_last_result(game)

    st.caption("Jump to a transaction (✅ = solved). You can replay transactions in any order.")
    jump_cols = st.columns(game.bank.size())
    for i, (col, t) in enumerate(zip(jump_cols, game.bank.all())):
        label = f"✅{t.id}" if game.is_solved(t.id) else t.id
        col.button(
            label,
            key=f"lab_jump_{t.id}",
            type="primary" if i == game.current_index else "secondary",
            on_click=on_jump_txn,
            args=(i,),
        )


def render_last_result(game: GameSession):
    result = game.last_result
    if result is None:
        return

    if result.ok:
        st.success("✅ Correct! You can move to the next transaction.")
    else:
        wrong = ", ".join(ACCOUNT_LABELS[k] for k in result.ordered_mismatches())
        st.error(f"❌ Not quite. Fix these accounts: {wrong}")

    st.info(f"Hint: {game.current_transaction.hint}")
    st.markdown("\n".join(f"- {p}" for p in PATTERNS))


# ----------------------------------------------------------------------
# 3. Step coach (view-local cursor)
# ----------------------------------------------------------------------
def render_step_coach(game: GameSession):
    txn = game.current_transaction
    step = st.session_state["coach_step"]

    st.subheader("✨ Step-by-step Coach")
    st.markdown(card("CURRENT TRANSACTION", txn.title), unsafe_allow_html=True)
    st.caption(md(txn.story))

    for i, s in enumerate(COACH_STEPS):
        marker = "✅" if i < step else ("👉 Now" if i == step else "Next")
        with st.container(border=True):
            st.markdown(f"**{s.title}** · {marker}")
            if i == step:
                st.write(s.body)

    st.markdown("**Coach Controls**")
    st.caption("Move the coach one step at a time while you solve.")
    c1, c2, c3 = st.columns(3)
    c1.button("← Back", key="coach_back", on_click=on_coach, args=(-1,))
    c2.button("Next →", key="coach_next", on_click=on_coach, args=(1,))
    c3.button("Restart Coach", key="coach_restart", on_click=on_coach, args=(0,))


def render_equation_lab():
    game = _game()
    main_col, side_col = st.columns([2, 1])
    with main_col:
        render_equation_panel(game)
        render_transaction_challenge(game)
    with side_col:
        render_step_coach(game)


# ----------------------------------------------------------------------
# 4. Quick sheet
# ----------------------------------------------------------------------
def render_quick_sheet():
    main_col, side_col = st.columns([2, 1])

    with main_col:
        st.subheader("📖 1-Page Quick Review")
        sheet_cols = st.columns(2)
        for i, section in enumerate(QUICK_SHEET):
            with sheet_cols[i % 2]:
                with st.container(border=True):
                    st.markdown(f"**{section.title}**")
                    st.markdown("\n".join(f"- {b}" for b in section.bullets))

    with side_col:
        st.subheader("Super-simple memorization")
        for head, body in MEMORIZE:
            st.markdown(f"**{head}**: {body}")
        st.markdown("\n".join(f"- {p}" for p in PATTERNS))

        st.subheader("Mini-checklist before exam")
        for item in EXAM_CHECKLIST:
            st.markdown(f"✅ {item}")


# ----------------------------------------------------------------------
# 5. Practice quiz
# ----------------------------------------------------------------------
def on_quiz_pick(option):
    _quiz().pick(option)


def on_quiz_next():
    _quiz().next()


def on_quiz_prev():
    _quiz().previous()


def on_quiz_reset():
    _quiz().reset()


def render_practice():
    quiz = _quiz()
    item = quiz.current
    main_col, side_col = st.columns([2, 1])

    with main_col:
        head_l, head_r = st.columns([3, 1])
        head_l.subheader("🧠 Practice Questions")
        head_r.caption(f"{quiz.index + 1}/{len(quiz.items)} · {item.tag}")
        st.progress(quiz.progress_percent())
        st.markdown(f"**{item.question}**")

        for i, opt in enumerate(item.options):
            label = opt
            if quiz.show and i == item.answer:
                label = f"✅ {opt}"
            elif quiz.show and i == quiz.selected:
                label = f"❌ {opt}"
            st.button(
                label,
                key=f"quiz_opt_{quiz.index}_{i}",
                disabled=quiz.show,
                on_click=on_quiz_pick,
                args=(i,),
            )

        if quiz.show:
            msg = f"Answer: {item.correct_option}\n\n{item.explanation}"
            if quiz.selected == item.answer:
                st.success(msg)
            else:
                st.error(msg)

        c1, c2, c3 = st.columns(3)
        c1.button("← Previous", key="quiz_prev", disabled=quiz.is_first, on_click=on_quiz_prev)
        c2.button("Next →", key="quiz_next", disabled=quiz.is_last, on_click=on_quiz_next)
        c3.button("Reset", key="quiz_reset", on_click=on_quiz_reset)

    with side_col:
        st.subheader("Score")
        st.metric("Correct", f"{quiz.score} / {len(quiz.items)}")
        st.caption("Tip: After you finish, go to Equation Lab and solve transactions again.")


# ----------------------------------------------------------------------
# 6. Quest mode
# ----------------------------------------------------------------------
def on_quest_move(step_delta):
    st.session_state["quest_stage"] = clamp_index(
        st.session_state["quest_stage"] + step_delta, len(QUEST_STAGES)
    )
    st.session_state["quest_pointer"] = None


def on_quest_cta():
    stage = QUEST_STAGES[st.session_state["quest_stage"]]
    if stage.jump:
        # tabs cannot be switched from code; point at the tab instead
        st.session_state["quest_pointer"] = TAB_NAMES[stage.jump]
    else:
        on_quest_move(1)


def render_quest():
    idx = st.session_state["quest_stage"]
    stage = QUEST_STAGES[idx]

    head_l, head_r = st.columns([3, 1])
    head_l.subheader("✨ Quest Mode (Step-by-step)")
    head_r.caption(f"{idx + 1}/{len(QUEST_STAGES)}")

    with st.container(border=True):
        st.markdown(f"**{stage.title}**")
        st.write(stage.body)
        st.button(stage.cta, key="quest_cta", type="primary", on_click=on_quest_cta)

    pointer = st.session_state.get("quest_pointer")
    if pointer:
        st.info(f"Open the **{pointer}** tab above to continue.")

    c1, c2 = st.columns(2)
    c1.button("← Back", key="quest_back", disabled=idx == 0, on_click=on_quest_move, args=(-1,))
    c2.button(
        "Next →",
        key="quest_next",
        disabled=idx == len(QUEST_STAGES) - 1,
        on_click=on_quest_move,
        args=(1,),
    )
    st.caption("Master transaction analysis. If you can solve T1–T11 correctly, you will do great in the exam.")


# ----------------------------------------------------------------------
# 7. main
# ----------------------------------------------------------------------
def main():
    configure_logging(PARAMS.log_level)
    st.set_page_config(layout=PARAMS.ui.layout, page_title=PARAMS.ui.page_title)
    inject_global_css()
    init_state()

    st.caption("✨ " + PARAMS.ui.page_title)
    st.title("Learn it like a game (and master transaction analysis)")
    st.write(
        "This page includes: a 1-page revision sheet, practice Q&A, and an interactive step-by-step "
        "\"Equation Lab\" focused on analyzing business transactions using the accounting equation."
    )
    st.markdown(pill("Memorize") + pill("Practice") + pill("Apply (A = L + E)"), unsafe_allow_html=True)

    try:
        tabs = st.tabs(list(TAB_NAMES.values()))
        with tabs[0]:
            render_quest()
        with tabs[1]:
            render_equation_lab()
        with tabs[2]:
            render_quick_sheet()
        with tabs[3]:
            render_practice()
    except Exception as e:
        logger.exception("render failed")
        st.error(f"Render error: {str(e)}")
        st.code(traceback.format_exc())

    st.markdown("**Suggested study plan**")
    st.markdown("\n".join(f"{i}. {s}" for i, s in enumerate(STUDY_PLAN, start=1)))


if __name__ == "__main__":
    main()

# ============== end accounting_game/ui/app.py ==============
