from . import main
from flask import current_app, redirect, render_template, request, url_for
from flask_login import current_user, login_required
from ..forms import SubmitForm, flash_errors
from ..services import get_services

@main.route('/')
def index():
    return render_template('home.html')

@main.route('/secrets')
@login_required
def secrets():
    if current_user.secret is None:
        return redirect(url_for('main.submit'))
    return render_template('secrets.html', secret=current_user.secret)

@main.route('/submit', methods=['GET', 'POST'])
@login_required
def submit():
    form = SubmitForm()
    if form.validate_on_submit():
        user = get_services().users.update_secret(current_user.email, form.secret.data)
        if user is None:
            # Row vanished between session load and update
            current_app.logger.warning("[DB] No user %s to store secret for", current_user.email)
            return redirect(url_for('auth.login'))
        return redirect(url_for('main.secrets'))
    if request.method == 'POST':
        flash_errors(form)
    return render_template('submit.html', form=form)
