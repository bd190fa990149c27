"""Small stand-alone demo programs: counter, duck, tic-tac-toe, producer-consumer and child."""