from flask_cors import CORS

# Singletons (initialized in app factory)
cors = CORS()
