def checkSubClasses(cls, check):
    """
    Run a check(subclass) function on all subclasses of cls.

    Returns how many subclasses were checked, and how many failed.
    """
    count = 0
    errors = 0
    worklist = [cls]
    while worklist:
        current_cls = worklist.pop()
        for subcls in current_cls.__subclasses__():
            worklist.append(subcls)
            errors += check(subcls)
            count += 1
    return count, errors
