# app.py
import os
from dotenv import load_dotenv; load_dotenv()

from magazine import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 5010)), debug=True)
