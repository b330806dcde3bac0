from todo_api.main import run

run()
