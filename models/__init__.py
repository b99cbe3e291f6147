from models.db_storage import DBStorage

# Process-wide session holder; the app factory calls storage.reload(url)
storage = DBStorage()
