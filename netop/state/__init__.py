"""States, the manager that runs them, the information catalog, and templating data helpers."""