from flask import Blueprint, current_app, render_template, redirect, url_for, flash, request, session
from flask_login import login_user, logout_user
from ..forms import LoginForm, RegisterForm, flash_errors
from ..services import get_services
from ..strategies import EMAIL_TAKEN
from ..utils.google import GoogleOAuthError, random_token

auth_bp = Blueprint('auth', __name__)

OAUTH_STATE_KEY = 'google_oauth_state'


def establish_session(user):
    # Permanent so PERMANENT_SESSION_LIFETIME (one hour) applies to the cookie
    session.permanent = True
    login_user(user)


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    form = RegisterForm()
    if form.validate_on_submit():
        result = get_services().local.register(form.username.data, form.password.data)
        if not result.ok:
            current_app.logger.info("[Auth] Registration refused for %s: %s", form.username.data, result.reason)
            if result.reason != EMAIL_TAKEN:
                flash(f"{result.reason}.", "warning")
                return redirect(url_for('auth.register'))
            flash("An account with that email already exists. Please log in.", "info")
            return redirect(url_for('auth.login'))
        establish_session(result.user)
        return redirect(url_for('main.secrets'))
    if request.method == 'POST':
        flash_errors(form)
    return render_template('register.html', form=form)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    form = LoginForm()
    if form.validate_on_submit():
        result = get_services().local.authenticate(form.username.data, form.password.data)
        if result.ok:
            establish_session(result.user)
            return redirect(url_for('main.secrets'))
        # Reason is logged, never shown
        current_app.logger.info("[Auth] Login failed for %s: %s", form.username.data, result.reason)
        flash("Invalid email or password.", "danger")
        return redirect(url_for('auth.login'))
    if request.method == 'POST':
        flash_errors(form)
    return render_template('login.html', form=form)


@auth_bp.route('/logout')
def logout():
    logout_user()
    session.pop(OAUTH_STATE_KEY, None)
    return redirect(url_for('main.index'))


@auth_bp.route('/auth/google')
def google_login():
    oauth = get_services().oauth
    if not oauth.enabled:
        flash("Google sign-in is not available.", "warning")
        return redirect(url_for('auth.login'))
    state = random_token()
    session[OAUTH_STATE_KEY] = state
    return redirect(oauth.authorization_url(state))


@auth_bp.route('/auth/google/secrets')
def google_callback():
    services = get_services()
    expected_state = session.pop(OAUTH_STATE_KEY, None)
    error = request.args.get('error')
    code = request.args.get('code')
    state = request.args.get('state')

    if error:
        current_app.logger.info("[OAuth] Google returned error: %s", error)
        return _oauth_failed()
    if not code or not expected_state or state != expected_state:
        current_app.logger.warning("[OAuth] Missing code or state mismatch on callback")
        return _oauth_failed()

    try:
        profile = services.oauth.profile_for_code(code)
    except GoogleOAuthError as e:
        current_app.logger.error("[OAuth] %s", e)
        return _oauth_failed()

    result = services.google.authenticate(profile)
    if not result.ok:
        current_app.logger.info("[OAuth] Sign-in refused: %s", result.reason)
        return _oauth_failed()

    establish_session(result.user)
    return redirect(url_for('main.secrets'))


def _oauth_failed():
    flash("Google sign-in failed. Please try again.", "danger")
    return redirect(url_for('auth.login'))
