import os

from portfolio import create_app

# Single-page portfolio. Theme comes from ?theme= (dark on a fresh load),
# the toggle button posts to /theme/toggle.
app = create_app()

# Runs on 0.0.0.0:8080 unless PORT is set. Start with: python3 run.py
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8080")), debug=True)
