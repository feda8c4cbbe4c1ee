from PyQt6.QtWidgets import QMessageBox


def _message_box(parent, object_name, title, text, buttons):
    msg = QMessageBox(parent)
    msg.setObjectName(object_name)
    msg.setWindowTitle(title)
    msg.setText(text)
    msg.setIcon(QMessageBox.Icon.NoIcon)
    msg.setStandardButtons(buttons)
    return msg.exec()


def show_error(parent, title, text, buttons=QMessageBox.StandardButton.Ok):
    return _message_box(parent, "errorDialog", title, text, buttons)


def show_info(parent, title, text, buttons=QMessageBox.StandardButton.Ok):
    return _message_box(parent, "infoDialog", title, text, buttons)
