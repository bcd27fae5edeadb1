import streamlit as st

from wordle_solver.config import MAX_GUESSES, TILE_COLORS, WORD_LENGTH, SolverSettings
from wordle_solver.solver import Feedback, SolverState, WordleSolver
from wordle_solver.words import default_wordlist_path, load_words

# Constants
DEFAULT_FEEDBACK = [Feedback.ABSENT] * WORD_LENGTH
FEEDBACK_OPTIONS = [Feedback.ABSENT, Feedback.PRESENT, Feedback.CORRECT]


# Helper Functions
@st.cache_resource  # Load the word list once per server
def load_wordlist(path: str):
    return load_words(path)


def get_color(status):
    return TILE_COLORS.get(status, TILE_COLORS["empty"])


def new_solver(use_popularity_prior: bool) -> WordleSolver:
    try:
        words, priors = load_wordlist(default_wordlist_path())
    except (FileNotFoundError, ValueError) as e:
        st.error(f"Error: could not load the word list: {e}")
        st.stop()
    return WordleSolver(words, priors, SolverSettings(use_popularity_prior=use_popularity_prior))


def display_guess_grid(history):
    st.markdown("""
        <style>
            .tile {
                display: inline-flex;
                justify-content: center;
                align-items: center;
                width: 50px;
                height: 50px;
                margin: 2px;
                font-size: 2em;
                font-weight: bold;
                text-transform: uppercase;
                color: white;
            }
        </style>
    """, unsafe_allow_html=True)

    for guess_word, feedback in history:
        cols = st.columns(WORD_LENGTH)
        for i, letter in enumerate(guess_word):
            with cols[i]:
                background = get_color(int(feedback[i]))
                st.markdown(f'<div class="tile" style="background-color:{background}">{letter}</div>',
                            unsafe_allow_html=True)

    for _ in range(max(0, MAX_GUESSES - len(history))):
        cols = st.columns(WORD_LENGTH)
        for i in range(WORD_LENGTH):
            with cols[i]:
                st.markdown(f'<div class="tile" style="background-color:{TILE_COLORS["empty"]}"> </div>',
                            unsafe_allow_html=True)


def reset_round_inputs():
    st.session_state.current_feedback = list(DEFAULT_FEEDBACK)
    st.session_state.current_guess_input = ""
    st.session_state.pop("user_guess_input_key", None)


# --- App Initialization & State ---
st.set_page_config(page_title="Wordle Solver", layout="wide")
st.title("Wordle Solver")
st.caption("Play the suggested word (or your own), click the letters to match the game's colours, then Submit.")

use_prior = st.sidebar.checkbox("Weight by word popularity", value=True)

if 'solver' not in st.session_state or st.session_state.use_prior != use_prior:
    st.session_state.solver = new_solver(use_prior)
    st.session_state.use_prior = use_prior
    reset_round_inputs()

solver = st.session_state.solver

if st.sidebar.button("New Game"):
    solver.reset()
    reset_round_inputs()
    st.rerun()

grid_col, control_col = st.columns([2, 1])

with grid_col:
    st.subheader("Guess Grid")
    display_guess_grid(solver.feedback_history)

with control_col:
    st.subheader("Controls")

    if solver.state == SolverState.SOLVED:
        st.success(f"Correct word is: {solver.answer.upper()} ({solver.guesses_made} guesses)")
        st.write("Start a 'New Game' from the sidebar.")
    elif solver.state == SolverState.EXHAUSTED:
        st.error("Couldn't find a match. Check the feedback you entered, or the word may not be in the list.")
        st.write("Start a 'New Game' from the sidebar.")
    else:
        suggested_guess = solver.suggest_guess()
        st.write(f"Possible words remaining: **{len(solver.candidates)}**")
        st.info(f"Solver Suggests: **{suggested_guess.upper()}**")

        if not st.session_state.current_guess_input:
            st.session_state.current_guess_input = suggested_guess

        guess = st.text_input(
            "Word you played:",
            value=st.session_state.current_guess_input,
            max_chars=WORD_LENGTH,
            key="user_guess_input_key",
        ).lower().strip()
        st.session_state.current_guess_input = guess

        if len(guess) == WORD_LENGTH and guess.isalpha():
            st.write("Click to set feedback for your guess:")
            feedback_cols = st.columns(WORD_LENGTH)
            for i, letter in enumerate(guess):
                with feedback_cols[i]:
                    current_status = st.session_state.current_feedback[i]
                    if st.button(letter.upper(), key=f"fb_{i}",
                                 help=f"Click to cycle feedback for '{letter.upper()}' (Current: {current_status.name})"):
                        next_index = (FEEDBACK_OPTIONS.index(current_status) + 1) % len(FEEDBACK_OPTIONS)
                        st.session_state.current_feedback[i] = FEEDBACK_OPTIONS[next_index]
                        st.rerun()

                    st.markdown(f'<div style="width:30px; height:10px; background-color:{get_color(int(current_status))};'
                                f' margin: auto; border: 1px solid black;"></div>', unsafe_allow_html=True)

            if st.button("Submit Guess and Feedback"):
                solver.apply_feedback(guess, st.session_state.current_feedback)
                reset_round_inputs()
                st.rerun()
        elif guess:
            st.warning("Type a 5-letter word to enable feedback input.")

if 1 < len(solver.candidates) <= solver.settings.show_remaining_limit and not solver.finished:
    with grid_col:
        st.write("---")
        st.write("**Remaining options:**")
        st.write(", ".join(solver.candidates))
