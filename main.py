# main.py

import io
import uuid
import logging
import webbrowser
from threading import Lock, Timer
from flask import Flask, jsonify, render_template, make_response, send_file, abort, request
from src.config import load_config
from src.engine import to_png_bytes
from src.game_loop import GameLoop

app = Flask(__name__)
app.config['AUTO_START'] = True

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(name)s %(levelname)s %(message)s')
logger = logging.getLogger(__name__)

# --- INITIALIZATION ---
print(">>> SNAKE: Loading rules...")
CONFIG = load_config()
print(">>> SNAKE: Ready.")

# Sessions
GAMES = {}
GAMES_LOCK = Lock()

SIDES = ('left', 'right')


def prune_idle_games():
    """Stop and forget sessions nobody has requested within session_timeout."""
    for user_id, loop in list(GAMES.items()):
        if loop.is_idle():
            loop.stop()
            del GAMES[user_id]
            logger.info(f"Dropped idle session {user_id}")


def get_game(start=False):
    """
    Return (loop, session id) for the request's cookie, creating a paused loop if needed.
    Only start=True routes (page load, button press) set the loop ticking.
    """
    user_id = request.cookies.get('snake_session')
    with GAMES_LOCK:
        prune_idle_games()
        if not user_id or user_id not in GAMES:
            user_id = str(uuid.uuid4())
            GAMES[user_id] = GameLoop(CONFIG, idle_timeout=CONFIG['session_timeout'])
        game = GAMES[user_id]
        game.touch()
    if start and app.config['AUTO_START'] and not game.running:
        game.start()
    return game, user_id


def with_session(resp, user_id):
    resp.set_cookie('snake_session', user_id)
    return resp


def open_browser():
    """Opens the game in the default browser after a short delay."""
    webbrowser.open_new("http://127.0.0.1:5000")

# --- ROUTES ---

@app.route('/')
def index():
    _, user_id = get_game(start=True)
    resp = make_response(render_template('index.html', interval_ms=int(CONFIG['update_interval'] * 1000)))
    return with_session(resp, user_id)

@app.route('/get_state')
def get_state():
    game, user_id = get_game()
    return with_session(jsonify(game.view_data()), user_id)

@app.route('/frame/<side>.png')
def frame(side):
    if side not in SIDES:
        abort(404)
    game, user_id = get_game()
    left, right = game.frame()
    image = left if side == 'left' else right
    resp = make_response(send_file(io.BytesIO(to_png_bytes(image)), mimetype='image/png'))
    resp.headers['Cache-Control'] = 'no-store'
    return with_session(resp, user_id)

@app.route('/press/<side>', methods=['POST'])
def press(side):
    if side not in SIDES:
        abort(404)
    game, user_id = get_game(start=True)
    if side == 'left':
        game.press_left()
    else:
        game.press_right()
    return with_session(jsonify(game.view_data()), user_id)

if __name__ == '__main__':
    # Schedule browser to open in 1.5 seconds (gives server time to start)
    Timer(1.5, open_browser).start()

    # Debug=False keeps the reloader from spawning a second set of game loops
    app.run(debug=False, port=5000, threaded=True)
